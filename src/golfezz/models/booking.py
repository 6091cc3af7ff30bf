"""
Booking models for tee times and range slots.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from golfezz.models.course import Course
from golfezz.models.mixins import parse_enum, to_float, to_int, to_str


class BookingStatus(str, Enum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'


class PaymentStatus(str, Enum):
    PENDING = 'pending'
    PAID = 'paid'
    REFUNDED = 'refunded'


class RangeBookingStatus(str, Enum):
    ACTIVE = 'active'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


@dataclass
class TeeTimeBooking:
    """Reserved tee time for a group of players."""
    id: str
    course_id: str
    user_id: str
    date: str
    time: str
    players: int
    status: BookingStatus
    total_amount: float = 0.0
    payment_status: PaymentStatus = PaymentStatus.PENDING
    special_requests: str | None = None
    checked_in: bool = False
    check_in_time: str | None = None
    course: Course | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'TeeTimeBooking':
        """
        Create TeeTimeBooking from an API payload.

        Raises:
            ValidationError: If status or payment status is not recognized
        """
        course = data.get('course')
        return cls(
            id=to_str(data.get('id')),
            course_id=to_str(data.get('course_id')),
            user_id=to_str(data.get('user_id')),
            date=data.get('date', ''),
            time=data.get('time', ''),
            players=to_int(data.get('players'), 1),
            status=parse_enum(BookingStatus, data.get('status'), 'booking status'),
            total_amount=to_float(data.get('total_amount')),
            payment_status=parse_enum(PaymentStatus, data.get('payment_status') or 'pending', 'payment status'),
            special_requests=data.get('special_requests'),
            checked_in=bool(data.get('checked_in', False)),
            check_in_time=data.get('check_in_time'),
            course=Course.from_dict(course) if isinstance(course, dict) else None,
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )


@dataclass
class RangeBooking:
    """Driving range slot booking."""
    id: str
    user_id: str
    course_id: str
    date: str
    start_time: str
    duration: int
    status: RangeBookingStatus
    bucket_size: str = ''
    bucket_count: int = 0
    used_buckets: int = 0
    total_amount: float = 0.0
    course: Course | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RangeBooking':
        course = data.get('course')
        return cls(
            id=to_str(data.get('id')),
            user_id=to_str(data.get('user_id')),
            course_id=to_str(data.get('course_id')),
            date=data.get('date', ''),
            start_time=data.get('start_time', ''),
            duration=to_int(data.get('duration')),
            status=parse_enum(RangeBookingStatus, data.get('status'), 'range booking status'),
            bucket_size=data.get('bucket_size', ''),
            bucket_count=to_int(data.get('bucket_count')),
            used_buckets=to_int(data.get('used_buckets')),
            total_amount=to_float(data.get('total_amount')),
            course=Course.from_dict(course) if isinstance(course, dict) else None,
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )


@dataclass
class AvailableTimeSlot:
    time: str
    available: bool
    price: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'AvailableTimeSlot':
        return cls(
            time=data.get('time', ''),
            available=bool(data.get('available', False)),
            price=to_float(data.get('price'))
        )
