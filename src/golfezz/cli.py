"""
Command line interface for the GolfEzz client.
"""

import argparse
import dataclasses
import getpass
import json
import sys
from enum import Enum
from typing import Any

from tabulate import tabulate

from golfezz.client import GolfEzzClient
from golfezz.config.error_aggregator import init_error_aggregator
from golfezz.config.logging import setup_logging
from golfezz.config.logging_filters import new_correlation_id
from golfezz.config.settings import ConfigurationManager
from golfezz.exceptions import ConfigError
from golfezz.exceptions import GolfEzzError
from golfezz.models.booking import AvailableTimeSlot
from golfezz.models.booking import RangeBooking
from golfezz.models.booking import TeeTimeBooking
from golfezz.models.course import Course
from golfezz.models.course import CourseCondition
from golfezz.models.course import GreenCondition
from golfezz.models.range import RangeSession
from golfezz.models.responses import ApiResponse
from golfezz.models.responses import PaginatedResponse
from golfezz.models.stats import DashboardStats
from golfezz.models.user import User
from golfezz.routing import SIGN_IN_URL
from golfezz.routing import get_role_display_name
from golfezz.utils.cli_utils import ArgumentValidator
from golfezz.utils.cli_utils import CLIBuilder
from golfezz.utils.cli_utils import CLIContext
from golfezz.utils.cli_utils import CLIOptionFactory
from golfezz.utils.cli_utils import CommandCategory
from golfezz.utils.cli_utils import CommandRegistry
from golfezz.utils.logging_utils import get_logger
from golfezz.views import DashboardPage
from golfezz.views import resolve_page
from golfezz.views.auth_pages import RegistrationForm
from golfezz.views.auth_pages import RegistrationWizard
from golfezz.views.auth_pages import SignInPage
from golfezz.views.base import PageResult

MAX_REDIRECTS = 3
TABLE_FORMAT = "psql"


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    return str(obj)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=_json_default))


def _print_table(rows: list[list[Any]] | list[tuple[Any, ...]], headers: list[str], empty: str) -> None:
    if not rows:
        print(empty)
        return
    print(tabulate(rows, headers=headers, tablefmt=TABLE_FORMAT))


def _wants_json(ctx: CLIContext) -> bool:
    return getattr(ctx.args, 'format', 'text') == 'json'


def _report(ctx: CLIContext, response: ApiResponse, success_message: str | None = None) -> int:
    """Print the outcome of a call that returns nothing worth tabulating."""
    if _wants_json(ctx):
        _print_json(response.to_dict())
        return 0 if response.success else 1
    if not response.success:
        print(f"Error: {response.error}", file=sys.stderr)
        return 1
    print(success_message or response.message or "Done")
    return 0


def _fail(response: ApiResponse) -> int:
    print(f"Error: {response.error}", file=sys.stderr)
    return 1


def _password(value: str | None, prompt: str = "Password: ") -> str:
    return value if value else getpass.getpass(prompt)


def _tee_time_rows(bookings: list[TeeTimeBooking]) -> list[list[Any]]:
    return [
        [b.id, b.course.name if b.course else b.course_id, b.date, b.time, b.players, b.status.value, b.payment_status.value]
        for b in bookings
    ]


def _range_rows(bookings: list[RangeBooking]) -> list[list[Any]]:
    return [
        [b.id, b.date, b.start_time, b.duration, f"{b.bucket_count} x {b.bucket_size}", b.status.value]
        for b in bookings
    ]


TEE_TIME_HEADERS = ["ID", "Course", "Date", "Time", "Players", "Status", "Payment"]
RANGE_HEADERS = ["ID", "Date", "Start", "Minutes", "Buckets", "Status"]


def _print_user(user: User) -> None:
    rows = [
        ("Name", user.name),
        ("Email", user.email),
        ("Role", get_role_display_name(user.role)),
        ("Status", user.status.value),
    ]
    if user.is_member:
        rows.append(("Membership", user.membership_type or "-"))
        if user.membership_expiry:
            rows.append(("Expires", user.membership_expiry))
        if user.handicap is not None:
            rows.append(("Handicap", user.handicap))
    print(tabulate(rows, tablefmt="plain"))


class AuthCommands:
    """Authentication command implementations."""

    @staticmethod
    @CommandRegistry.register(
        name='login',
        help_text='Sign in and store the session',
        category=CommandCategory.AUTH,
        options=[
            {'name': '--email', 'required': True, 'help': 'Account email'},
            {'name': '--password', 'help': 'Account password (prompted when omitted)'},
            {
                'name': '--role',
                'choices': ['member', 'admin'],
                'help': 'Sign in through the member or admin form'
            }
        ],
        parent_command='auth'
    )
    def login(ctx: CLIContext) -> int:
        page = SignInPage(ctx.client)
        result = page.submit(ctx.args.email, _password(ctx.args.password), ctx.args.role)
        if result.error:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        user = ctx.client.auth.user
        print(f"Signed in as {user.name if user else ctx.args.email}")
        print(f"Dashboard: {result.redirect}")
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='register',
        help_text='Register a new member account',
        category=CommandCategory.AUTH,
        options=[
            {'name': '--name', 'required': True, 'help': 'Full name'},
            {'name': '--email', 'required': True, 'help': 'Account email'},
            {'name': '--password', 'help': 'Password (prompted when omitted)'},
            {'name': '--phone', 'default': '', 'help': 'Phone number'},
            {'name': '--date-of-birth', 'default': '', 'help': 'Date of birth, YYYY-MM-DD'},
            {
                'name': '--membership-type',
                'choices': ['basic', 'premium', 'vip'],
                'default': 'basic',
                'help': 'Membership tier (default: basic)'
            },
            {
                'name': '--agree-terms',
                'action': 'store_true',
                'help': 'Agree to the terms and conditions'
            }
        ],
        parent_command='auth'
    )
    def register(ctx: CLIContext) -> int:
        password = _password(ctx.args.password)
        confirm = password if ctx.args.password else getpass.getpass("Confirm password: ")
        wizard = RegistrationWizard(
            ctx.client,
            RegistrationForm(
                name=ctx.args.name,
                email=ctx.args.email,
                password=password,
                confirm_password=confirm,
                phone=ctx.args.phone,
                date_of_birth=ctx.args.date_of_birth,
                membership_type=ctx.args.membership_type,
                agree_to_terms=ctx.args.agree_terms
            )
        )
        result = wizard.submit()
        if result.error:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        print(f"Registered {ctx.args.email}")
        print(f"Dashboard: {result.redirect}")
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='logout',
        help_text='Sign out and remove the stored session',
        category=CommandCategory.AUTH,
        parent_command='auth'
    )
    def logout(ctx: CLIContext) -> int:
        ctx.client.auth.logout()
        print("Signed out")
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='whoami',
        help_text='Show the signed-in user',
        category=CommandCategory.AUTH,
        options=[CLIOptionFactory.create_format_option()],
        parent_command='auth'
    )
    def whoami(ctx: CLIContext) -> int:
        user = ctx.client.auth.initialize()
        if user is None:
            print("Not signed in", file=sys.stderr)
            return 1
        if _wants_json(ctx):
            _print_json(user.to_dict())
        else:
            _print_user(user)
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='change-password',
        help_text='Change the account password',
        category=CommandCategory.AUTH,
        options=[
            {'name': '--old-password', 'help': 'Current password (prompted when omitted)'},
            {'name': '--new-password', 'help': 'New password (prompted when omitted)'}
        ],
        parent_command='auth'
    )
    def change_password(ctx: CLIContext) -> int:
        old = _password(ctx.args.old_password, "Current password: ")
        new = _password(ctx.args.new_password, "New password: ")
        response = ctx.client.auth_service.change_password(old, new)
        return _report(ctx, response, "Password changed")


class DashboardCommands:
    """Dashboard command implementations."""

    @staticmethod
    def _follow(ctx: CLIContext, route: str | None) -> PageResult:
        """Load a page and follow redirects."""
        page = resolve_page(route, ctx.client) if route else DashboardPage(ctx.client)
        result = page.load()
        hops = 0
        while result.is_redirect and result.redirect != SIGN_IN_URL and hops < MAX_REDIRECTS:
            ctx.logger.debug(f"Following redirect to {result.redirect}")
            result = resolve_page(str(result.redirect), ctx.client).load()
            hops += 1
        return result

    @staticmethod
    @CommandRegistry.register(
        name='show',
        help_text='Show the dashboard for the signed-in user',
        category=CommandCategory.DASHBOARD,
        options=[
            {'name': '--route', 'help': 'Load a specific page route, e.g. /member/vip/dashboard'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='dashboard'
    )
    def show(ctx: CLIContext) -> int:
        try:
            result = DashboardCommands._follow(ctx, ctx.args.route)
        except KeyError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            return 1

        if result.is_redirect:
            print("Not signed in. Run 'golfezz auth login' first.", file=sys.stderr)
            return 1

        if _wants_json(ctx):
            _print_json({'route': result.route, 'error': result.error, 'data': result.data})
            return 0

        print(f"\n{result.route}")
        print("=" * 60)
        if result.error:
            print(f"Warning: {result.error}")
        user = result.data.get('user')
        if isinstance(user, User):
            _print_user(user)
            print()
        stats = result.data.get('stats')
        if isinstance(stats, DashboardStats):
            print(tabulate(stats.rows(), tablefmt="plain"))
            print()
        if 'tee_time_bookings' in result.data:
            print("Tee times")
            _print_table(_tee_time_rows(result.data['tee_time_bookings']), TEE_TIME_HEADERS, "No tee-time bookings")
            print("\nRange")
            _print_table(_range_rows(result.data['range_bookings']), RANGE_HEADERS, "No range bookings")
        return 0


class CourseCommands:
    """Course command implementations."""

    @staticmethod
    @CommandRegistry.register(
        name='list',
        help_text='List golf courses',
        category=CommandCategory.COURSES,
        options=[
            {'name': '--search', 'help': 'Filter by name or location'},
            {'name': '--difficulty', 'help': 'Filter by difficulty'},
            {
                'name': '--public',
                'action': 'store_true',
                'help': 'Use the public listing, no sign-in needed'
            },
            *CLIOptionFactory.create_pagination_options(),
            CLIOptionFactory.create_format_option()
        ],
        parent_command='courses'
    )
    def list_courses(ctx: CLIContext) -> int:
        if ctx.args.public:
            response = ctx.client.courses.get_public_courses()
        else:
            response = ctx.client.courses.get_courses(
                {'search': ctx.args.search, 'difficulty': ctx.args.difficulty},
                {'page': ctx.args.page, 'limit': ctx.args.limit}
            )
        if not response.success:
            return _fail(response)
        page = PaginatedResponse.from_dict(response.data, Course.from_dict)
        if _wants_json(ctx):
            _print_json(page)
            return 0
        rows = [
            [c.id, c.name, c.holes, c.par, c.difficulty, f"{c.green_fee_weekday:.2f}", f"{c.green_fee_weekend:.2f}"]
            for c in page.items
        ]
        _print_table(rows, ["ID", "Name", "Holes", "Par", "Difficulty", "Weekday", "Weekend"], "No courses found")
        if page.total_pages > 1:
            print(f"Page {page.page} of {page.total_pages} ({page.total} courses)")
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='show',
        help_text='Show one course',
        category=CommandCategory.COURSES,
        options=[
            CLIOptionFactory.create_id_argument('course_id', 'Course ID'),
            CLIOptionFactory.create_format_option()
        ],
        parent_command='courses'
    )
    def show_course(ctx: CLIContext) -> int:
        response = ctx.client.courses.get_course(ctx.args.course_id)
        if not response.success:
            return _fail(response)
        course = Course.from_dict(response.data or {})
        if _wants_json(ctx):
            _print_json(course)
            return 0
        print(tabulate([
            ("Name", course.name),
            ("Address", course.address),
            ("Holes / Par", f"{course.holes} / {course.par}"),
            ("Length", course.length),
            ("Hours", f"{course.open_time}-{course.close_time}"),
            ("Amenities", ", ".join(course.amenities) or "-"),
        ], tablefmt="plain"))
        if course.hole_details:
            print()
            _print_table(
                [[h.hole_number, h.par, h.length, h.handicap, len(h.hazards)] for h in course.hole_details],
                ["Hole", "Par", "Length", "Hcp", "Hazards"],
                ""
            )
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='conditions',
        help_text='Show current conditions of a course',
        category=CommandCategory.COURSES,
        options=[
            CLIOptionFactory.create_id_argument('course_id', 'Course ID'),
            CLIOptionFactory.create_format_option()
        ],
        parent_command='courses'
    )
    def course_conditions(ctx: CLIContext) -> int:
        response = ctx.client.courses.get_course_conditions(ctx.args.course_id)
        if not response.success:
            return _fail(response)
        condition = CourseCondition.from_dict(response.data or {})
        if _wants_json(ctx):
            _print_json(condition)
            return 0
        print(tabulate([
            ("Green speed", condition.green_speed),
            ("Fairway", condition.fairway_condition),
            ("Rough", condition.rough_condition),
            ("Bunkers", condition.bunker_condition),
            ("Weather", condition.weather_condition),
            ("Temperature", condition.temperature),
            ("Wind", condition.wind_speed),
            ("Updated", condition.last_updated or "-"),
        ], tablefmt="plain"))
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='green',
        help_text='Show public green conditions',
        category=CommandCategory.COURSES,
        options=[CLIOptionFactory.create_format_option()],
        parent_command='courses'
    )
    def green_conditions(ctx: CLIContext) -> int:
        response = ctx.client.courses.get_green_conditions()
        if not response.success:
            return _fail(response)
        conditions = PaginatedResponse.from_dict(response.data, GreenCondition.from_dict).items
        if _wants_json(ctx):
            _print_json(conditions)
            return 0
        rows = [
            [g.golf_course_id, g.date, g.green_speed, g.firmness_rating, g.moisture_level, g.weather_condition]
            for g in conditions
        ]
        _print_table(rows, ["Course", "Date", "Speed", "Firmness", "Moisture", "Weather"], "No green reports")
        return 0


class BookingCommands:
    """Booking command implementations."""

    @staticmethod
    @CommandRegistry.register(
        name='list',
        help_text='List your tee-time and range bookings',
        category=CommandCategory.BOOKINGS,
        options=[CLIOptionFactory.create_format_option()],
        parent_command='bookings'
    )
    def list_bookings(ctx: CLIContext) -> int:
        bookings = ctx.client.bookings.fetch_user_bookings()
        if _wants_json(ctx):
            _print_json(bookings)
            return 0 if bookings.success else 1
        if bookings.error:
            print(f"Warning: {bookings.error}", file=sys.stderr)
        print("Tee times")
        _print_table(_tee_time_rows(bookings.tee_time_bookings), TEE_TIME_HEADERS, "No tee-time bookings")
        print("\nRange")
        _print_table(_range_rows(bookings.range_bookings), RANGE_HEADERS, "No range bookings")
        return 0 if bookings.success else 1

    @staticmethod
    @CommandRegistry.register(
        name='book',
        help_text='Book a tee time',
        category=CommandCategory.BOOKINGS,
        options=[
            {'name': '--course-id', 'required': True, 'help': 'Course ID'},
            CLIOptionFactory.create_date_option(required=True),
            CLIOptionFactory.create_time_option(required=True),
            {
                'name': '--players',
                'type': int,
                'default': 1,
                'help': 'Number of players (default: 1)',
                'validator': lambda x: 1 <= x <= 4
            },
            {'name': '--special-requests', 'help': 'Notes for the pro shop'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='bookings'
    )
    def book(ctx: CLIContext) -> int:
        request: dict[str, Any] = {
            'course_id': ctx.args.course_id,
            'date': ctx.args.date,
            'time': ctx.args.time,
            'players': ctx.args.players,
        }
        if ctx.args.special_requests:
            request['special_requests'] = ctx.args.special_requests
        response = ctx.client.bookings.book_tee_time(request)
        return _report(ctx, response, f"Booked {ctx.args.date} {ctx.args.time} for {ctx.args.players}")

    @staticmethod
    @CommandRegistry.register(
        name='cancel',
        help_text='Cancel a booking',
        category=CommandCategory.BOOKINGS,
        options=[
            CLIOptionFactory.create_id_argument('booking_id', 'Booking ID'),
            {'name': '--range', 'action': 'store_true', 'help': 'Cancel a range booking'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='bookings'
    )
    def cancel(ctx: CLIContext) -> int:
        if ctx.args.range:
            response = ctx.client.bookings.cancel_range_booking(ctx.args.booking_id)
        else:
            response = ctx.client.bookings.cancel_tee_time_booking(ctx.args.booking_id)
        return _report(ctx, response, f"Cancelled booking {ctx.args.booking_id}")

    @staticmethod
    @CommandRegistry.register(
        name='slots',
        help_text='Show available slots for a course and date',
        category=CommandCategory.BOOKINGS,
        options=[
            CLIOptionFactory.create_id_argument('course_id', 'Course ID'),
            CLIOptionFactory.create_date_option(required=True),
            {'name': '--range', 'action': 'store_true', 'help': 'Show driving range slots'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='bookings'
    )
    def slots(ctx: CLIContext) -> int:
        if ctx.args.range:
            response = ctx.client.bookings.get_available_range_slots(ctx.args.course_id, ctx.args.date)
        else:
            response = ctx.client.bookings.get_available_tee_times(ctx.args.course_id, ctx.args.date)
        if not response.success:
            return _fail(response)
        slots = PaginatedResponse.from_dict(response.data, AvailableTimeSlot.from_dict).items
        if _wants_json(ctx):
            _print_json(slots)
            return 0
        rows = [[s.time, "yes" if s.available else "no", f"{s.price:.2f}"] for s in slots]
        _print_table(rows, ["Time", "Available", "Price"], "No slots")
        return 0


class RangeCommands:
    """Driving range command implementations."""

    @staticmethod
    def _print_session(ctx: CLIContext, response: ApiResponse, message: str) -> int:
        if not response.success:
            return _fail(response)
        payload = response.data.get('session', response.data) if isinstance(response.data, dict) else None
        if _wants_json(ctx) or not isinstance(payload, dict):
            _print_json(response.to_dict())
            return 0
        session = RangeSession.from_dict(payload)
        print(message)
        print(tabulate([
            ("Session", session.id),
            ("Bay", session.bay_number if session.bay_number is not None else "-"),
            ("Started", session.start_time),
            ("Status", session.status.value),
            ("Total", f"{session.total_amount:.2f}"),
        ], tablefmt="plain"))
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='start',
        help_text='Start a range session',
        category=CommandCategory.RANGE,
        options=[
            {'name': '--bay', 'type': int, 'help': 'Bay number'},
            {'name': '--notes', 'help': 'Session notes'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='range'
    )
    def start(ctx: CLIContext) -> int:
        response = ctx.client.range.start_session(ctx.args.bay, ctx.args.notes)
        return RangeCommands._print_session(ctx, response, "Session started")

    @staticmethod
    @CommandRegistry.register(
        name='end',
        help_text='End a range session',
        category=CommandCategory.RANGE,
        options=[
            CLIOptionFactory.create_id_argument('session_id', 'Session ID'),
            CLIOptionFactory.create_format_option()
        ],
        parent_command='range'
    )
    def end(ctx: CLIContext) -> int:
        response = ctx.client.range.end_session(ctx.args.session_id)
        return RangeCommands._print_session(ctx, response, "Session ended")

    @staticmethod
    @CommandRegistry.register(
        name='active',
        help_text='List active range sessions',
        category=CommandCategory.RANGE,
        options=[CLIOptionFactory.create_format_option()],
        parent_command='range'
    )
    def active(ctx: CLIContext) -> int:
        response = ctx.client.range.get_active_sessions()
        if not response.success:
            return _fail(response)
        data = response.data
        if isinstance(data, dict) and isinstance(data.get('sessions'), list):
            data = data['sessions']
        sessions = PaginatedResponse.from_dict(data, RangeSession.from_dict).items
        if _wants_json(ctx):
            _print_json(sessions)
            return 0
        rows = [
            [s.id, s.bay_number if s.bay_number is not None else "-", s.start_time, len(s.ball_buckets), len(s.equipment)]
            for s in sessions
        ]
        _print_table(rows, ["ID", "Bay", "Started", "Buckets", "Equipment"], "No active sessions")
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='bucket',
        help_text='Add a ball bucket to a session',
        category=CommandCategory.RANGE,
        options=[
            CLIOptionFactory.create_id_argument('session_id', 'Session ID'),
            {'name': '--size', 'choices': ['small', 'medium', 'large'], 'default': 'medium', 'help': 'Bucket size'},
            {'name': '--count', 'type': int, 'default': 50, 'help': 'Ball count (default: 50)',
             'validator': lambda x: x > 0},
            {'name': '--price', 'type': float, 'required': True, 'help': 'Bucket price'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='range'
    )
    def bucket(ctx: CLIContext) -> int:
        response = ctx.client.range.add_ball_bucket(ctx.args.session_id, ctx.args.size, ctx.args.count, ctx.args.price)
        return _report(ctx, response, f"Added {ctx.args.size} bucket to session {ctx.args.session_id}")

    @staticmethod
    @CommandRegistry.register(
        name='equipment',
        help_text='Add rented equipment to a session',
        category=CommandCategory.RANGE,
        options=[
            CLIOptionFactory.create_id_argument('session_id', 'Session ID'),
            {'name': '--type', 'required': True, 'help': 'Equipment type, e.g. club'},
            {'name': '--name', 'required': True, 'help': 'Equipment name'},
            {'name': '--quantity', 'type': int, 'default': 1, 'help': 'Quantity (default: 1)',
             'validator': lambda x: x > 0},
            {'name': '--price', 'type': float, 'required': True, 'help': 'Rental price'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='range'
    )
    def equipment(ctx: CLIContext) -> int:
        response = ctx.client.range.add_equipment(
            ctx.args.session_id, ctx.args.type, ctx.args.name, ctx.args.quantity, ctx.args.price
        )
        return _report(ctx, response, f"Added {ctx.args.name} to session {ctx.args.session_id}")


class AdminCommands:
    """Administration command implementations."""

    @staticmethod
    @CommandRegistry.register(
        name='stats',
        help_text='Show admin dashboard statistics',
        category=CommandCategory.ADMIN,
        options=[CLIOptionFactory.create_format_option()],
        parent_command='admin'
    )
    def stats(ctx: CLIContext) -> int:
        response = ctx.client.admin.get_dashboard_stats()
        if not response.success:
            return _fail(response)
        stats = DashboardStats.from_dict(response.data)
        if _wants_json(ctx):
            _print_json(stats)
            return 0
        print(tabulate(stats.rows(), tablefmt="plain"))
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='users',
        help_text='List users',
        category=CommandCategory.ADMIN,
        options=[
            {'name': '--role', 'choices': ['member', 'admin', 'super_admin'], 'help': 'Filter by role'},
            {'name': '--status', 'choices': ['active', 'inactive', 'suspended'], 'help': 'Filter by status'},
            {'name': '--search', 'help': 'Search name or email'},
            *CLIOptionFactory.create_pagination_options(),
            CLIOptionFactory.create_format_option()
        ],
        parent_command='admin'
    )
    def users(ctx: CLIContext) -> int:
        response = ctx.client.admin.get_users(
            {'role': ctx.args.role, 'status': ctx.args.status, 'search': ctx.args.search},
            page=ctx.args.page,
            limit=ctx.args.limit
        )
        if not response.success:
            return _fail(response)
        page = PaginatedResponse.from_dict(response.data, User.from_dict)
        if _wants_json(ctx):
            _print_json({'users': [u.to_dict() for u in page.items], 'total': page.total, 'page': page.page})
            return 0
        rows = [
            [u.id, u.name, u.email, get_role_display_name(u.role), u.membership_type or "-", u.status.value]
            for u in page.items
        ]
        _print_table(rows, ["ID", "Name", "Email", "Role", "Membership", "Status"], "No users found")
        if page.total_pages > 1:
            print(f"Page {page.page} of {page.total_pages} ({page.total} users)")
        return 0

    @staticmethod
    @CommandRegistry.register(
        name='export',
        help_text='Request a data export',
        category=CommandCategory.ADMIN,
        options=[
            {'name': '--type', 'choices': ['users', 'bookings', 'revenue', 'all'], 'default': 'all',
             'help': 'Data to export (default: all)'},
            {'name': '--export-format', 'choices': ['csv', 'json', 'xlsx'], 'default': 'csv',
             'help': 'Export file format (default: csv)'},
            CLIOptionFactory.create_format_option()
        ],
        parent_command='admin'
    )
    def export(ctx: CLIContext) -> int:
        response = ctx.client.admin.export_data(ctx.args.type, ctx.args.export_format)
        url = response.data.get('downloadUrl') if isinstance(response.data, dict) else None
        return _report(ctx, response, f"Export ready: {url}" if url else "Export requested")

    @staticmethod
    @CommandRegistry.register(
        name='logs',
        help_text='Show system logs',
        category=CommandCategory.ADMIN,
        options=[
            {'name': '--level', 'choices': ['info', 'warning', 'error'], 'help': 'Minimum level'},
            *CLIOptionFactory.create_pagination_options(),
            CLIOptionFactory.create_format_option()
        ],
        parent_command='admin'
    )
    def logs(ctx: CLIContext) -> int:
        response = ctx.client.admin.get_system_logs(ctx.args.page, ctx.args.limit, ctx.args.level)
        if not response.success:
            return _fail(response)
        page = PaginatedResponse.from_dict(response.data, lambda entry: entry)
        if _wants_json(ctx):
            _print_json(page)
            return 0
        rows = [
            [e.get('timestamp', ''), e.get('level', ''), e.get('action', ''), e.get('message', '')]
            for e in page.items
        ]
        _print_table(rows, ["Time", "Level", "Action", "Message"], "No log entries")
        return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser from the registered commands."""
    builder = CLIBuilder("GolfEzz golf course client")
    for command in CommandRegistry.all_commands():
        builder.add_command(command)
    return builder.build()


def _config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.api_url:
        overrides['api'] = {'url': args.api_url}
    if args.log_file:
        overrides['logging'] = {'file': args.log_file}
    return overrides


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ConfigurationManager().load_config(args.config_dir, _config_overrides(args))
    except ConfigError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 1

    setup_logging(config, verbose=args.verbose, log_file=args.log_file)
    logger = get_logger(__name__)
    new_correlation_id()

    aggregator = init_error_aggregator(config.error_aggregation)

    command = CommandRegistry.get_command(getattr(args, 'command_key', args.command))
    if not command:
        logger.error(f"Unknown command: {args.command}")
        return 1

    errors = ArgumentValidator.validate_args(args, command)
    if errors:
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    client = GolfEzzClient(config)
    ctx = CLIContext(
        args=args,
        logger=logger,
        config=config,
        parser=parser,
        client=client
    )

    try:
        return command.handler(ctx)
    except GolfEzzError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logger.error(f"Command {command.key} failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()
        aggregator.shutdown()


if __name__ == "__main__":
    sys.exit(main())
