"""Tests for dashboard and course page loaders."""

from unittest.mock import MagicMock

import pytest

from golfezz.models.responses import ApiResponse
from golfezz.models.user import MembershipTier
from golfezz.models.user import User
from golfezz.services.auth_context import AuthContext
from golfezz.services.auth_context import AuthState
from golfezz.services.booking_service import UserBookings
from golfezz.views import PAGES
from golfezz.views import resolve_page
from golfezz.views.courses import CoursesPage
from golfezz.views.dashboards import AdminDashboardPage
from golfezz.views.dashboards import DashboardPage
from golfezz.views.dashboards import MemberDashboardPage

from tests.conftest import ADMIN_USER, MEMBER_USER


def make_app(user_data=None, state=AuthState.RESOLVED):
    app = MagicMock()
    app.auth = MagicMock(spec=AuthContext)
    app.auth.state = state
    app.auth.user = User.from_dict(user_data) if user_data else None
    app.bookings.fetch_user_bookings.return_value = UserBookings()
    app.dashboard.get_stats.return_value = ApiResponse.ok({"total_bookings": 4})
    app.admin.get_dashboard_stats.return_value = ApiResponse.ok({"total_revenue": 1500})
    return app


def test_dashboard_redirects_anonymous_to_sign_in():
    assert DashboardPage(make_app()).load().redirect == "/auth/signin"


def test_dashboard_resolves_auth_first():
    app = make_app(state=AuthState.LOADING)
    DashboardPage(app).load()
    app.auth.initialize.assert_called_once()


@pytest.mark.parametrize("user,expected", [
    (MEMBER_USER, "/member/premium/dashboard"),
    (ADMIN_USER, "/admin/dashboard"),
    (dict(MEMBER_USER, membership_type="platinum"), "/member/dashboard"),
])
def test_dashboard_redirects_by_role(user, expected):
    assert DashboardPage(make_app(user)).load().redirect == expected


def test_member_tier_page_renders_for_matching_tier():
    app = make_app(MEMBER_USER)

    result = MemberDashboardPage(app, MembershipTier.PREMIUM).load()

    assert not result.is_redirect
    assert result.route == "/member/premium/dashboard"
    assert result.data["stats"].total_bookings == 4
    assert result.error is None


def test_member_tier_page_rejects_other_tier():
    result = MemberDashboardPage(make_app(MEMBER_USER), MembershipTier.VIP).load()
    assert result.redirect == "/auth/signin"


def test_general_member_page_sends_admin_to_admin_dashboard():
    result = MemberDashboardPage(make_app(ADMIN_USER)).load()
    assert result.redirect == "/admin/dashboard"

    super_admin = dict(ADMIN_USER, role="super_admin")
    assert MemberDashboardPage(make_app(super_admin)).load().redirect == "/admin/dashboard"


def test_member_tier_page_rejects_admin():
    result = MemberDashboardPage(make_app(ADMIN_USER), MembershipTier.PREMIUM).load()
    assert result.redirect == "/auth/signin"


def test_general_member_page_redirects_anonymous_to_sign_in():
    assert MemberDashboardPage(make_app()).load().redirect == "/auth/signin"


def test_general_member_page_accepts_any_member():
    result = MemberDashboardPage(make_app(dict(MEMBER_USER, membership_type=None))).load()
    assert not result.is_redirect
    assert result.route == "/member/dashboard"


def test_member_page_renders_with_fetch_error():
    app = make_app(MEMBER_USER)
    app.bookings.fetch_user_bookings.return_value = UserBookings(error="Range unavailable")

    result = MemberDashboardPage(app, MembershipTier.PREMIUM).load()

    assert not result.is_redirect
    assert result.error == "Range unavailable"
    assert result.data["tee_time_bookings"] == []


def test_admin_page_access():
    assert AdminDashboardPage(make_app()).load().redirect == "/auth/signin"
    assert AdminDashboardPage(make_app(MEMBER_USER)).load().redirect == "/member/dashboard"

    result = AdminDashboardPage(make_app(ADMIN_USER)).load()
    assert not result.is_redirect
    assert result.data["stats"].total_revenue == 1500


def test_courses_page():
    app = make_app()
    app.courses.get_public_courses.return_value = ApiResponse.ok([{"id": 1, "name": "Pine Hills"}])
    app.courses.get_green_conditions.return_value = ApiResponse.fail("HTTP 503: Service Unavailable", 503)

    result = CoursesPage(app).load()

    assert [c.name for c in result.data["courses"]] == ["Pine Hills"]
    assert result.data["green_conditions"] == []
    assert result.error == "HTTP 503: Service Unavailable"


def test_resolve_page():
    app = make_app()
    page = resolve_page("/member/vip/dashboard/", app)
    assert isinstance(page, MemberDashboardPage)
    assert page.tier == MembershipTier.VIP
    assert set(PAGES) >= {"/dashboard", "/admin/dashboard", "/auth/signin", "/courses"}

    with pytest.raises(KeyError):
        resolve_page("/nowhere", app)
