"""Tests for the data models."""

import pytest

from golfezz.exceptions import ValidationError
from golfezz.models.booking import PaymentStatus
from golfezz.models.booking import RangeBooking
from golfezz.models.booking import TeeTimeBooking
from golfezz.models.course import Course
from golfezz.models.range import RangeSession
from golfezz.models.responses import ApiResponse
from golfezz.models.responses import PaginatedResponse
from golfezz.models.stats import DashboardStats
from golfezz.models.user import MembershipTier
from golfezz.models.user import Role
from golfezz.models.user import User
from golfezz.models.user import UserStatus

from tests.conftest import MEMBER_USER


def test_user_from_dict():
    user = User.from_dict(dict(MEMBER_USER, handicap="12.4", preferences={
        "preferred_tee_time": "08:00",
        "notifications": {"email": True},
        "unknown": "ignored",
    }))

    assert user.role == Role.MEMBER
    assert user.status == UserStatus.ACTIVE
    assert user.tier == MembershipTier.PREMIUM
    assert user.handicap == 12.4
    assert user.preferences is not None and user.preferences.notifications.email
    assert user.to_dict()["email"] == "member@example.com"


def test_user_unknown_role_rejected():
    with pytest.raises(ValidationError, match="Invalid role"):
        User.from_dict(dict(MEMBER_USER, role="owner"))


def test_user_unknown_tier_is_none():
    assert User.from_dict(dict(MEMBER_USER, membership_type="gold")).tier is None


@pytest.mark.parametrize("value", ["VIP", "Premium", " basic", 3, None])
def test_tier_matches_exact_values_only(value):
    assert MembershipTier.from_value(value) is None


def test_course_from_dict():
    course = Course.from_dict({
        "id": 7,
        "name": "Pine Hills",
        "green_fee_weekday": "65.5",
        "hole_details": [{"hole_number": 1, "par": 4, "length": 380, "hazards": [{"type": "water"}]}],
        "amenities": ["range"],
    })

    assert course.id == "7"
    assert course.holes == 18
    assert course.green_fee_weekday == 65.5
    assert course.hole_details[0].hazards[0].type == "water"


def test_booking_statuses_are_strict():
    booking = TeeTimeBooking.from_dict({
        "id": 1, "course_id": 2, "user_id": 3, "date": "2026-06-01", "time": "08:00",
        "players": 4, "status": "pending",
    })
    assert booking.payment_status == PaymentStatus.PENDING

    with pytest.raises(ValidationError):
        TeeTimeBooking.from_dict({"id": 1, "status": "confirmed", "payment_status": "stolen"})
    with pytest.raises(ValidationError):
        RangeBooking.from_dict({"id": 1, "status": "pending"})


def test_range_session_nested():
    session = RangeSession.from_dict({
        "id": 5, "user_id": 1, "start_time": "10:00", "status": "active", "bay_number": 3,
        "ball_buckets": [{"id": 1, "range_session_id": 5, "bucket_size": "large", "ball_count": 100}],
        "equipment": [{"id": 2, "range_session_id": 5, "equipment_type": "club", "equipment_name": "Driver"}],
    })
    assert session.bay_number == 3
    assert session.ball_buckets[0].ball_count == 100
    assert session.equipment[0].quantity == 1


def test_paginated_flat_shape():
    page = PaginatedResponse.from_dict(
        {"data": [{"id": 1}], "total": 41, "page": 2, "limit": 20, "total_pages": 3},
        lambda item: item["id"]
    )
    assert page.items == [1]
    assert (page.total, page.page, page.limit, page.total_pages) == (41, 2, 20, 3)
    assert page.has_next


def test_paginated_nested_shape():
    page = PaginatedResponse.from_dict(
        {"data": [], "pagination": {"page": 1, "limit": 10, "total": 0, "totalPages": 0}},
        lambda item: item
    )
    assert page.items == []
    assert page.limit == 10
    assert not page.has_next


def test_api_response_from_body():
    response = ApiResponse.from_body({"success": True, "data": [1], "message": "ok"}, 200)
    assert response == ApiResponse(success=True, data=[1], message="ok")
    assert response.to_dict() == {"success": True, "data": [1], "message": "ok"}


def test_dashboard_stats_rows():
    stats = DashboardStats.from_dict({"total_bookings": 3, "user_spending": 120, "recent_activities": []})
    rows = dict(stats.rows())
    assert rows["Total bookings"] == 3
    assert rows["User spending"] == 120
    assert "Recent activities" not in rows
