"""
Role based dashboard routing.
"""

import logging
from collections.abc import Mapping
from typing import Any

from golfezz.models.mixins import parse_enum
from golfezz.models.user import MembershipTier
from golfezz.models.user import Role
from golfezz.models.user import User

logger = logging.getLogger(__name__)

SIGN_IN_URL = '/auth/signin'
ADMIN_DASHBOARD_URL = '/admin/dashboard'
MEMBER_DASHBOARD_URL = '/member/dashboard'

ROLE_DISPLAY_NAMES = {
    Role.SUPER_ADMIN: 'Super Administrator',
    Role.ADMIN: 'Administrator',
    Role.MEMBER: 'Member',
}


def _role_of(user: User | Mapping[str, Any]) -> Role:
    """Get the role of a User or a raw user dict.

    Raises:
        ValidationError: If the role is not one of the known roles
    """
    if isinstance(user, User):
        return user.role
    return parse_enum(Role, user.get('role'), 'role')


def _membership_type_of(user: User | Mapping[str, Any]) -> Any:
    if isinstance(user, User):
        return user.membership_type
    return user.get('membership_type')


def member_dashboard_url(tier: MembershipTier | None) -> str:
    return f'/member/{tier.value}/dashboard' if tier else MEMBER_DASHBOARD_URL


def get_dashboard_url(user: User | Mapping[str, Any]) -> str:
    """Pick the dashboard route for a user.

    Admins and super admins go to the admin dashboard. Members go to their
    tier's dashboard, or the general member dashboard when the tier is
    missing or unknown.

    Args:
        user: A User or a raw user dict with role and membership_type

    Returns:
        Route string

    Raises:
        ValidationError: If the role is not one of the known roles
    """
    role = _role_of(user)
    if role in (Role.ADMIN, Role.SUPER_ADMIN):
        return ADMIN_DASHBOARD_URL

    membership_type = _membership_type_of(user)
    tier = MembershipTier.from_value(membership_type)
    if tier is None and membership_type:
        logger.warning(f"Unknown membership type {membership_type!r}, using general member dashboard")
    return member_dashboard_url(tier)


def is_admin_user(user: User | Mapping[str, Any] | None) -> bool:
    if user is None:
        return False
    return _role_of(user) in (Role.ADMIN, Role.SUPER_ADMIN)


def is_member_user(user: User | Mapping[str, Any] | None) -> bool:
    if user is None:
        return False
    return _role_of(user) == Role.MEMBER


def get_role_display_name(role: Role | str | None) -> str:
    """Human readable role name; anything unrecognized is shown as User."""
    try:
        return ROLE_DISPLAY_NAMES.get(Role(role), 'User') if role is not None else 'User'
    except ValueError:
        return 'User'
