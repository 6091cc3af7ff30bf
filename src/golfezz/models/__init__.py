"""Data models for GolfEzz."""

from golfezz.models.booking import AvailableTimeSlot
from golfezz.models.booking import BookingStatus
from golfezz.models.booking import PaymentStatus
from golfezz.models.booking import RangeBooking
from golfezz.models.booking import RangeBookingStatus
from golfezz.models.booking import TeeTimeBooking
from golfezz.models.course import Course
from golfezz.models.course import CourseCondition
from golfezz.models.course import GreenCondition
from golfezz.models.course import Hazard
from golfezz.models.course import HoleDetail
from golfezz.models.range import BallBucket
from golfezz.models.range import RangeEquipment
from golfezz.models.range import RangeSession
from golfezz.models.responses import ApiResponse
from golfezz.models.responses import PaginatedResponse
from golfezz.models.stats import DashboardStats
from golfezz.models.user import MembershipTier
from golfezz.models.user import Role
from golfezz.models.user import User
from golfezz.models.user import UserStatus

__all__ = [
    'ApiResponse',
    'AvailableTimeSlot',
    'BallBucket',
    'BookingStatus',
    'Course',
    'CourseCondition',
    'DashboardStats',
    'GreenCondition',
    'Hazard',
    'HoleDetail',
    'MembershipTier',
    'PaginatedResponse',
    'PaymentStatus',
    'RangeBooking',
    'RangeBookingStatus',
    'RangeEquipment',
    'RangeSession',
    'Role',
    'User',
    'UserStatus',
]
