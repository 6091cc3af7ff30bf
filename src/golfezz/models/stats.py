"""
Dashboard statistics models.
"""

from dataclasses import dataclass, field
from typing import Any

from golfezz.models.mixins import to_float, to_int


@dataclass
class DashboardStats:
    """Stats shown on member and admin dashboards.

    Only the common fields are typed; role specific fields stay in extra.
    """
    total_bookings: int = 0
    total_revenue: float = 0.0
    active_members: int = 0
    course_utilization: float = 0.0
    popular_times: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    _TYPED_FIELDS = ('total_bookings', 'total_revenue', 'active_members', 'course_utilization', 'popular_times')

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> 'DashboardStats':
        data = data or {}
        return cls(
            total_bookings=to_int(data.get('total_bookings')),
            total_revenue=to_float(data.get('total_revenue')),
            active_members=to_int(data.get('active_members')),
            course_utilization=to_float(data.get('course_utilization')),
            popular_times=list(data.get('popular_times') or []),
            extra={k: v for k, v in data.items() if k not in cls._TYPED_FIELDS}
        )

    def rows(self) -> list[tuple[str, Any]]:
        """Key/value rows for table rendering."""
        rows: list[tuple[str, Any]] = [
            ('Total bookings', self.total_bookings),
            ('Total revenue', f"{self.total_revenue:.2f}"),
            ('Active members', self.active_members),
            ('Course utilization', f"{self.course_utilization:.1f}%"),
        ]
        if self.popular_times:
            rows.append(('Popular times', ', '.join(self.popular_times)))
        for key, value in sorted(self.extra.items()):
            if isinstance(value, (str, int, float)):
                rows.append((key.replace('_', ' ').capitalize(), value))
        return rows
