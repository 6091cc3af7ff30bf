"""
Driving range session models.
"""

from dataclasses import dataclass, field
from typing import Any

from golfezz.models.booking import RangeBookingStatus
from golfezz.models.mixins import parse_enum, to_float, to_int, to_str


@dataclass
class BallBucket:
    id: str
    range_session_id: str
    bucket_size: str
    ball_count: int
    price: float = 0.0
    is_returned: bool = False
    returned_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'BallBucket':
        return cls(
            id=to_str(data.get('id')),
            range_session_id=to_str(data.get('range_session_id')),
            bucket_size=data.get('bucket_size', ''),
            ball_count=to_int(data.get('ball_count')),
            price=to_float(data.get('price')),
            is_returned=bool(data.get('is_returned', False)),
            returned_at=data.get('returned_at')
        )


@dataclass
class RangeEquipment:
    """Rented equipment attached to a range session."""
    id: str
    range_session_id: str
    equipment_type: str
    equipment_name: str
    quantity: int = 1
    price: float = 0.0
    is_returned: bool = False
    returned_at: str | None = None
    condition: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RangeEquipment':
        return cls(
            id=to_str(data.get('id')),
            range_session_id=to_str(data.get('range_session_id')),
            equipment_type=data.get('equipment_type', ''),
            equipment_name=data.get('equipment_name', ''),
            quantity=to_int(data.get('quantity'), 1),
            price=to_float(data.get('price')),
            is_returned=bool(data.get('is_returned', False)),
            returned_at=data.get('returned_at'),
            condition=data.get('condition')
        )


@dataclass
class RangeSession:
    """Walk-in session at a range bay."""
    id: str
    user_id: str
    start_time: str
    status: RangeBookingStatus
    end_time: str | None = None
    duration_minutes: int | None = None
    total_amount: float = 0.0
    bay_number: int | None = None
    notes: str | None = None
    ball_buckets: list[BallBucket] = field(default_factory=list)
    equipment: list[RangeEquipment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RangeSession':
        """
        Create RangeSession from an API payload.

        Args:
            data: Session dictionary, optionally with nested buckets and equipment

        Returns:
            RangeSession instance
        """
        duration = data.get('duration_minutes')
        bay = data.get('bay_number')
        return cls(
            id=to_str(data.get('id')),
            user_id=to_str(data.get('user_id')),
            start_time=data.get('start_time', ''),
            status=parse_enum(RangeBookingStatus, data.get('status'), 'range session status'),
            end_time=data.get('end_time'),
            duration_minutes=to_int(duration) if duration is not None else None,
            total_amount=to_float(data.get('total_amount')),
            bay_number=to_int(bay) if bay is not None else None,
            notes=data.get('notes'),
            ball_buckets=[BallBucket.from_dict(b) for b in data.get('ball_buckets') or []],
            equipment=[RangeEquipment.from_dict(e) for e in data.get('equipment') or []]
        )
