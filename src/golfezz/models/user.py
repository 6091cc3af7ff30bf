"""
User model for GolfEzz.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from golfezz.models.mixins import parse_enum, to_float, to_str


class Role(str, Enum):
    """User roles known to the backend."""
    MEMBER = 'member'
    ADMIN = 'admin'
    SUPER_ADMIN = 'super_admin'


class UserStatus(str, Enum):
    ACTIVE = 'active'
    INACTIVE = 'inactive'
    SUSPENDED = 'suspended'


class MembershipTier(str, Enum):
    """Membership tiers that have a dedicated dashboard."""
    BASIC = 'basic'
    PREMIUM = 'premium'
    VIP = 'vip'

    @classmethod
    def from_value(cls, value: Any) -> 'MembershipTier | None':
        """Resolve a membership type string exactly, returning None when unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class NotificationSettings:
    email: bool = False
    sms: bool = False
    push: bool = False


@dataclass
class UserPreferences:
    """Member playing preferences."""
    preferred_tee_time: str = ''
    preferred_courses: list[str] = field(default_factory=list)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    playing_style: str = ''

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'UserPreferences':
        notifications = data.get('notifications') or {}
        return cls(
            preferred_tee_time=data.get('preferred_tee_time', ''),
            preferred_courses=list(data.get('preferred_courses') or []),
            notifications=NotificationSettings(
                email=bool(notifications.get('email', False)),
                sms=bool(notifications.get('sms', False)),
                push=bool(notifications.get('push', False))
            ),
            playing_style=data.get('playing_style', '')
        )


@dataclass
class User:
    """User model."""
    id: str
    email: str
    name: str
    role: Role
    status: UserStatus = UserStatus.ACTIVE
    email_verified: bool = False
    image: str | None = None
    phone: str | None = None
    address: str | None = None
    date_of_birth: str | None = None

    # Member fields
    membership_id: str | None = None
    membership_type: str | None = None
    membership_expiry: str | None = None
    membership_status: str | None = None
    handicap: float | None = None
    preferences: UserPreferences | None = None

    # Admin fields
    admin_level: str | None = None
    can_manage_courses: bool = False
    can_manage_users: bool = False
    can_manage_pricing: bool = False
    can_view_analytics: bool = False
    last_login_at: str | None = None

    two_factor_enabled: bool = False
    created_at: str | None = None
    updated_at: str | None = None

    # Raw payload as received, kept so the session store can persist it unchanged
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def tier(self) -> MembershipTier | None:
        """Membership tier resolved from membership_type."""
        return MembershipTier.from_value(self.membership_type)

    @property
    def is_admin(self) -> bool:
        return self.role in (Role.ADMIN, Role.SUPER_ADMIN)

    @property
    def is_member(self) -> bool:
        return self.role == Role.MEMBER

    @property
    def is_super_admin(self) -> bool:
        return self.role == Role.SUPER_ADMIN

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'User':
        """
        Create User instance from an API payload.
        
        Args:
            data: User dictionary as returned by the API
            
        Returns:
            User instance
            
        Raises:
            ValidationError: If role or status is not recognized
        """
        preferences = data.get('preferences')
        handicap = data.get('handicap')
        return cls(
            id=to_str(data.get('id')),
            email=data.get('email', ''),
            name=data.get('name', ''),
            role=parse_enum(Role, data.get('role'), 'role'),
            status=parse_enum(UserStatus, data.get('status') or 'active', 'status'),
            email_verified=bool(data.get('email_verified', False)),
            image=data.get('image'),
            phone=data.get('phone'),
            address=data.get('address'),
            date_of_birth=data.get('date_of_birth'),
            membership_id=data.get('membership_id'),
            membership_type=data.get('membership_type'),
            membership_expiry=data.get('membership_expiry'),
            membership_status=data.get('membership_status'),
            handicap=to_float(handicap) if handicap is not None else None,
            preferences=UserPreferences.from_dict(preferences) if isinstance(preferences, dict) else None,
            admin_level=data.get('admin_level'),
            can_manage_courses=bool(data.get('can_manage_courses', False)),
            can_manage_users=bool(data.get('can_manage_users', False)),
            can_manage_pricing=bool(data.get('can_manage_pricing', False)),
            can_view_analytics=bool(data.get('can_view_analytics', False)),
            last_login_at=data.get('last_login_at'),
            two_factor_enabled=bool(data.get('two_factor_enabled', False)),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at'),
            raw=dict(data)
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the user payload suitable for persisting."""
        if self.raw:
            return dict(self.raw)
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'role': self.role.value,
            'status': self.status.value,
            'phone': self.phone,
            'membership_type': self.membership_type,
            'membership_expiry': self.membership_expiry,
            'membership_status': self.membership_status,
            'handicap': self.handicap,
        }
