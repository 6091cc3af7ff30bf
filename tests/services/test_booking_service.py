"""Tests for the booking service."""

import threading

import pytest

from golfezz.models.booking import BookingStatus
from golfezz.models.responses import ApiResponse
from golfezz.services.booking_service import BookingService

TEE_TIME = {
    "id": "b-1",
    "course_id": "c-1",
    "user_id": "u-1",
    "date": "2026-06-01",
    "time": "08:30",
    "players": 2,
    "status": "confirmed",
    "payment_status": "paid",
    "total_amount": 120,
}

RANGE = {
    "id": "r-1",
    "course_id": "c-1",
    "user_id": "u-1",
    "date": "2026-06-01",
    "start_time": "10:00",
    "duration": 60,
    "bucket_size": "medium",
    "bucket_count": 2,
    "status": "active",
}


@pytest.fixture
def booking_service(mock_http):
    return BookingService(mock_http)


def _route(tee_response, range_response):
    def get(endpoint, data=None, params=None):
        if endpoint == "/bookings/tee-time":
            return tee_response
        if endpoint == "/bookings/range":
            return range_response
        raise AssertionError(f"unexpected endpoint {endpoint}")
    return get


def test_fetch_user_bookings_joins_both(booking_service, mock_http):
    """Test that both listings are parsed and joined."""
    mock_http.get.side_effect = _route(
        ApiResponse.ok({"data": [TEE_TIME], "total": 1, "page": 1, "limit": 20, "total_pages": 1}),
        ApiResponse.ok({"data": [RANGE], "pagination": {"page": 1, "limit": 20, "total": 1, "totalPages": 1}})
    )

    result = booking_service.fetch_user_bookings()

    assert result.success
    assert result.total == 2
    assert result.tee_time_bookings[0].status == BookingStatus.CONFIRMED
    assert result.range_bookings[0].bucket_count == 2


def test_fetch_user_bookings_partial_failure(booking_service, mock_http):
    """Test that a failing half reports its error and keeps the other half."""
    mock_http.get.side_effect = _route(
        ApiResponse.ok([TEE_TIME]),
        ApiResponse.fail("Range service unavailable", 503)
    )

    result = booking_service.fetch_user_bookings()

    assert not result.success
    assert result.error == "Range service unavailable"
    assert len(result.tee_time_bookings) == 1
    assert result.range_bookings == []


def test_fetch_user_bookings_reports_first_error(booking_service, mock_http):
    """Test that only the tee-time error is reported when both fail."""
    mock_http.get.side_effect = _route(
        ApiResponse.fail("Tee times unavailable"),
        ApiResponse.fail("Range unavailable")
    )

    result = booking_service.fetch_user_bookings()

    assert result.error == "Tee times unavailable"
    assert result.total == 0


def test_fetch_user_bookings_runs_concurrently(booking_service, mock_http):
    """Test that both requests are in flight at the same time."""
    barrier = threading.Barrier(2, timeout=5)

    def get(endpoint, data=None, params=None):
        barrier.wait()
        return ApiResponse.ok([])

    mock_http.get.side_effect = get

    result = booking_service.fetch_user_bookings()

    assert result.success
    assert mock_http.get.call_count == 2


def test_fetch_user_bookings_invalid_status(booking_service, mock_http):
    """Test that an unknown booking status is reported as an error."""
    mock_http.get.side_effect = _route(
        ApiResponse.ok([dict(TEE_TIME, status="teleported")]),
        ApiResponse.ok([RANGE])
    )

    result = booking_service.fetch_user_bookings()

    assert "Invalid booking status" in result.error
    assert len(result.range_bookings) == 1


def test_legacy_bookings_shape(booking_service, mock_http):
    """Test the {'bookings': [...], 'count': n} listing shape."""
    mock_http.get.side_effect = _route(
        ApiResponse.ok({"bookings": [TEE_TIME], "count": 1}),
        ApiResponse.ok({"bookings": [], "count": 0})
    )

    result = booking_service.fetch_user_bookings()

    assert len(result.tee_time_bookings) == 1


@pytest.mark.parametrize("method,args,verb,endpoint", [
    ("get_available_tee_times", ("c-1", "2026-06-01"), "get", "/courses/c-1/available-times"),
    ("book_tee_time", ({"course_id": "c-1"},), "post", "/bookings/tee-time"),
    ("get_tee_time_booking", ("b-1",), "get", "/bookings/tee-time/b-1"),
    ("cancel_tee_time_booking", ("b-1",), "patch", "/bookings/tee-time/b-1/cancel"),
    ("get_available_range_slots", ("c-1", "2026-06-01"), "get", "/courses/c-1/available-range"),
    ("book_range", ({"course_id": "c-1"},), "post", "/bookings/range"),
    ("get_range_booking", ("r-1",), "get", "/bookings/range/r-1"),
    ("update_range_booking", ("r-1", {"bucket_count": 3}), "patch", "/bookings/range/r-1"),
    ("cancel_range_booking", ("r-1",), "patch", "/bookings/range/r-1/cancel"),
    ("get_all_bookings", (), "get", "/bookings/all"),
    ("get_booking_stats", (), "get", "/bookings/stats"),
    ("create_booking", ({"course_id": "c-1"},), "post", "/bookings"),
    ("get_my_bookings", (), "get", "/bookings/my"),
    ("get_booking", ("b-1",), "get", "/bookings/b-1"),
    ("cancel_booking", ("b-1",), "post", "/bookings/b-1/cancel"),
    ("get_available_slots", ("c-1", "2026-06-01"), "get", "/bookings/available-slots"),
])
def test_endpoints(booking_service, mock_http, method, args, verb, endpoint):
    """Test that each call hits its route."""
    getattr(booking_service, method)(*args)
    assert getattr(mock_http, verb).call_args.args[0] == endpoint


def test_filters_build_query(booking_service, mock_http):
    """Test that only non-empty filters reach the query string."""
    booking_service.get_tee_time_bookings({"status": "confirmed", "date_from": "", "course_id": "c-1"})
    assert mock_http.get.call_args.kwargs["params"] == {"status": "confirmed", "courseId": "c-1"}
