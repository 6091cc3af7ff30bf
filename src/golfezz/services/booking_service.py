"""
Booking service for tee times and driving range slots.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from golfezz.exceptions import ValidationError
from golfezz.models.booking import RangeBooking
from golfezz.models.booking import TeeTimeBooking
from golfezz.models.responses import ApiResponse
from golfezz.models.responses import PaginatedResponse
from golfezz.services.base_service import BaseService
from golfezz.utils.logging_utils import log_execution


@dataclass
class UserBookings:
    """Tee-time and range bookings of the current user, fetched together."""
    tee_time_bookings: list[TeeTimeBooking] = field(default_factory=list)
    range_bookings: list[RangeBooking] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def total(self) -> int:
        return len(self.tee_time_bookings) + len(self.range_bookings)


class BookingService(BaseService):
    """Tee-time, range and legacy booking calls."""
    
    FETCH_WORKERS = 2
    
    def _filter_params(self, filters: dict[str, Any] | None) -> dict[str, Any]:
        filters = filters or {}
        return self.build_params(
            status=filters.get('status'),
            dateFrom=filters.get('date_from'),
            dateTo=filters.get('date_to'),
            courseId=filters.get('course_id')
        )
    
    # Tee times
    
    def get_available_tee_times(self, course_id: str, date: str) -> ApiResponse:
        return self.client.get(f'/courses/{course_id}/available-times', params={'date': date})
    
    def book_tee_time(self, request: dict[str, Any]) -> ApiResponse:
        """Book a tee time.
        
        Args:
            request: course_id, date (YYYY-MM-DD), time (HH:MM), players and
                optional special_requests
        """
        return self.client.post('/bookings/tee-time', request)
    
    def get_tee_time_bookings(self, filters: dict[str, Any] | None = None) -> ApiResponse:
        return self.client.get('/bookings/tee-time', params=self._filter_params(filters))
    
    def get_tee_time_booking(self, booking_id: str) -> ApiResponse:
        return self.client.get(f'/bookings/tee-time/{booking_id}')
    
    def cancel_tee_time_booking(self, booking_id: str) -> ApiResponse:
        return self.client.patch(f'/bookings/tee-time/{booking_id}/cancel')
    
    # Driving range
    
    def get_available_range_slots(self, course_id: str, date: str) -> ApiResponse:
        return self.client.get(f'/courses/{course_id}/available-range', params={'date': date})
    
    def book_range(self, request: dict[str, Any]) -> ApiResponse:
        return self.client.post('/bookings/range', request)
    
    def get_range_bookings(self, filters: dict[str, Any] | None = None) -> ApiResponse:
        return self.client.get('/bookings/range', params=self._filter_params(filters))
    
    def get_range_booking(self, booking_id: str) -> ApiResponse:
        return self.client.get(f'/bookings/range/{booking_id}')
    
    def update_range_booking(self, booking_id: str, updates: dict[str, Any]) -> ApiResponse:
        """Update a range booking, for example to add buckets."""
        return self.client.patch(f'/bookings/range/{booking_id}', updates)
    
    def cancel_range_booking(self, booking_id: str) -> ApiResponse:
        return self.client.patch(f'/bookings/range/{booking_id}/cancel')
    
    # General
    
    def get_all_bookings(self) -> ApiResponse:
        return self.client.get('/bookings/all')
    
    def get_booking_stats(self) -> ApiResponse:
        return self.client.get('/bookings/stats')
    
    # Legacy booking routes
    
    def create_booking(self, data: dict[str, Any]) -> ApiResponse:
        return self.client.post('/bookings', data)
    
    def get_my_bookings(self) -> ApiResponse:
        return self.client.get('/bookings/my')
    
    def get_booking(self, booking_id: str) -> ApiResponse:
        return self.client.get(f'/bookings/{booking_id}')
    
    def cancel_booking(self, booking_id: str) -> ApiResponse:
        return self.client.post(f'/bookings/{booking_id}/cancel')
    
    def get_available_slots(self, course_id: str, date: str) -> ApiResponse:
        return self.client.get(
            '/bookings/available-slots',
            params={'course_id': course_id, 'date': date}
        )
    
    # Joined fetch
    
    @staticmethod
    def _items(data: Any) -> Any:
        """Unwrap legacy {'bookings': [...]} listings."""
        if isinstance(data, dict) and isinstance(data.get('bookings'), list):
            return data['bookings']
        return data
    
    @log_execution(level='DEBUG')
    def fetch_user_bookings(self) -> UserBookings:
        """
        Fetch tee-time and range bookings concurrently and join them.
        
        Both requests always run to completion. When one fails, the other
        half is still returned and the error of the first failing request
        is reported, with the tee-time request taking precedence.
        
        Returns:
            UserBookings with both lists and the first error, if any
        """
        with ThreadPoolExecutor(max_workers=self.FETCH_WORKERS) as executor:
            tee_future = executor.submit(self.get_tee_time_bookings)
            range_future = executor.submit(self.get_range_bookings)
            tee_response = tee_future.result()
            range_response = range_future.result()
        
        result = UserBookings()
        errors: list[str] = []
        
        if tee_response.success:
            try:
                result.tee_time_bookings = PaginatedResponse.from_dict(
                    self._items(tee_response.data), TeeTimeBooking.from_dict
                ).items
            except ValidationError as e:
                errors.append(e.message)
        else:
            errors.append(tee_response.error or 'Failed to load tee-time bookings')
        
        if range_response.success:
            try:
                result.range_bookings = PaginatedResponse.from_dict(
                    self._items(range_response.data), RangeBooking.from_dict
                ).items
            except ValidationError as e:
                errors.append(e.message)
        else:
            errors.append(range_response.error or 'Failed to load range bookings')
        
        if errors:
            result.error = errors[0]
            self.warning("Booking fetch incomplete", error=result.error, failures=len(errors))
        return result
