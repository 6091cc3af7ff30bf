"""Resource services for the GolfEzz API."""

from golfezz.services.admin_service import AdminService
from golfezz.services.auth_context import AuthContext
from golfezz.services.auth_context import AuthState
from golfezz.services.auth_service import AuthService
from golfezz.services.booking_service import BookingService
from golfezz.services.booking_service import UserBookings
from golfezz.services.course_service import CourseService
from golfezz.services.dashboard_service import DashboardService
from golfezz.services.range_service import RangeService

__all__ = [
    'AdminService',
    'AuthContext',
    'AuthService',
    'AuthState',
    'BookingService',
    'CourseService',
    'DashboardService',
    'RangeService',
    'UserBookings',
]
