"""
Golf course models.
"""

from dataclasses import dataclass, field
from typing import Any

from golfezz.models.mixins import to_float, to_int, to_str


@dataclass
class Hazard:
    type: str
    description: str = ''
    position: str = ''

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Hazard':
        return cls(
            type=data.get('type', ''),
            description=data.get('description', ''),
            position=data.get('position', '')
        )


@dataclass
class HoleDetail:
    """Per-hole layout details."""
    hole_number: int
    par: int
    length: int
    handicap: int = 0
    description: str | None = None
    hazards: list[Hazard] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'HoleDetail':
        return cls(
            hole_number=to_int(data.get('hole_number')),
            par=to_int(data.get('par')),
            length=to_int(data.get('length')),
            handicap=to_int(data.get('handicap')),
            description=data.get('description'),
            hazards=[Hazard.from_dict(h) for h in data.get('hazards') or []]
        )


@dataclass
class CourseCondition:
    """Point-in-time maintenance and weather snapshot for a course."""
    course_id: str
    id: str = ''
    green_speed: float = 0.0
    fairway_condition: str = ''
    rough_condition: str = ''
    bunker_condition: str = ''
    weather_condition: str = ''
    temperature: float = 0.0
    wind_speed: float = 0.0
    humidity: float = 0.0
    last_updated: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'CourseCondition':
        return cls(
            course_id=to_str(data.get('course_id')),
            id=to_str(data.get('id')),
            green_speed=to_float(data.get('green_speed')),
            fairway_condition=data.get('fairway_condition', ''),
            rough_condition=data.get('rough_condition', ''),
            bunker_condition=data.get('bunker_condition', ''),
            weather_condition=data.get('weather_condition', ''),
            temperature=to_float(data.get('temperature')),
            wind_speed=to_float(data.get('wind_speed')),
            humidity=to_float(data.get('humidity')),
            last_updated=data.get('last_updated')
        )


@dataclass
class GreenCondition:
    """Daily green report published on the public endpoints."""
    golf_course_id: str
    date: str
    id: str = ''
    green_speed: float = 0.0
    firmness_rating: float = 0.0
    moisture_level: float = 0.0
    weather_condition: str = ''
    temperature: float = 0.0
    wind_speed: float = 0.0
    wind_direction: str = ''
    notes: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'GreenCondition':
        return cls(
            golf_course_id=to_str(data.get('golf_course_id')),
            date=data.get('date', ''),
            id=to_str(data.get('id')),
            green_speed=to_float(data.get('green_speed')),
            firmness_rating=to_float(data.get('firmness_rating')),
            moisture_level=to_float(data.get('moisture_level')),
            weather_condition=data.get('weather_condition', ''),
            temperature=to_float(data.get('temperature')),
            wind_speed=to_float(data.get('wind_speed')),
            wind_direction=data.get('wind_direction', ''),
            notes=data.get('notes')
        )


@dataclass
class Course:
    """Golf course with pricing and booking settings."""
    id: str
    name: str
    description: str = ''
    address: str = ''
    phone: str = ''
    email: str = ''
    website: str | None = None
    holes: int = 18
    par: int = 72
    length: int = 0
    difficulty: str = ''
    image: str | None = None
    images: list[str] = field(default_factory=list)
    amenities: list[str] = field(default_factory=list)
    hole_details: list[HoleDetail] = field(default_factory=list)

    green_fee_weekday: float = 0.0
    green_fee_weekend: float = 0.0
    green_fee_holiday: float = 0.0
    cart_fee: float = 0.0
    club_rental_fee: float = 0.0
    range_ball_price: float = 0.0
    member_discount: float = 0.0

    is_active: bool = True
    booking_advance_days: int = 0
    max_players_per_slot: int = 4
    slot_duration: int = 0
    open_time: str = ''
    close_time: str = ''

    conditions: list[CourseCondition] = field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Course':
        """
        Create Course instance from an API payload.
        
        Args:
            data: Course dictionary as returned by the API
            
        Returns:
            Course instance
        """
        return cls(
            id=to_str(data.get('id')),
            name=data.get('name', ''),
            description=data.get('description', ''),
            address=data.get('address', ''),
            phone=data.get('phone', ''),
            email=data.get('email', ''),
            website=data.get('website'),
            holes=to_int(data.get('holes'), 18),
            par=to_int(data.get('par'), 72),
            length=to_int(data.get('length')),
            difficulty=data.get('difficulty', ''),
            image=data.get('image'),
            images=list(data.get('images') or []),
            amenities=list(data.get('amenities') or []),
            hole_details=[HoleDetail.from_dict(h) for h in data.get('hole_details') or []],
            green_fee_weekday=to_float(data.get('green_fee_weekday')),
            green_fee_weekend=to_float(data.get('green_fee_weekend')),
            green_fee_holiday=to_float(data.get('green_fee_holiday')),
            cart_fee=to_float(data.get('cart_fee')),
            club_rental_fee=to_float(data.get('club_rental_fee')),
            range_ball_price=to_float(data.get('range_ball_price')),
            member_discount=to_float(data.get('member_discount')),
            is_active=bool(data.get('is_active', True)),
            booking_advance_days=to_int(data.get('booking_advance_days')),
            max_players_per_slot=to_int(data.get('max_players_per_slot'), 4),
            slot_duration=to_int(data.get('slot_duration')),
            open_time=data.get('open_time', ''),
            close_time=data.get('close_time', ''),
            conditions=[CourseCondition.from_dict(c) for c in data.get('conditions') or []],
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )
