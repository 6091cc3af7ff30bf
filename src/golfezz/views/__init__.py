"""Page loaders and the route table."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from golfezz.models.user import MembershipTier
from golfezz.views.auth_pages import RegistrationForm
from golfezz.views.auth_pages import RegistrationWizard
from golfezz.views.auth_pages import SignInPage
from golfezz.views.base import Page
from golfezz.views.base import PageResult
from golfezz.views.courses import CoursesPage
from golfezz.views.dashboards import AdminDashboardPage
from golfezz.views.dashboards import DashboardPage
from golfezz.views.dashboards import MemberDashboardPage

if TYPE_CHECKING:
    from golfezz.client import GolfEzzClient

PageFactory = Callable[['GolfEzzClient'], Page]

PAGES: dict[str, PageFactory] = {
    '/dashboard': DashboardPage,
    '/admin/dashboard': AdminDashboardPage,
    '/member/dashboard': MemberDashboardPage,
    '/member/basic/dashboard': lambda app: MemberDashboardPage(app, MembershipTier.BASIC),
    '/member/premium/dashboard': lambda app: MemberDashboardPage(app, MembershipTier.PREMIUM),
    '/member/vip/dashboard': lambda app: MemberDashboardPage(app, MembershipTier.VIP),
    '/courses': CoursesPage,
    '/auth/signin': SignInPage,
    '/auth/register-new': RegistrationWizard,
}


def resolve_page(route: str, app: 'GolfEzzClient') -> Page:
    """Get the page loader for a route.

    Raises:
        KeyError: If no page is registered for the route
    """
    normalized = '/' + route.strip('/') if route.strip('/') else '/'
    if normalized not in PAGES:
        raise KeyError(f"No page registered for route {route!r}")
    return PAGES[normalized](app)


__all__ = [
    'PAGES',
    'AdminDashboardPage',
    'CoursesPage',
    'DashboardPage',
    'MemberDashboardPage',
    'Page',
    'PageResult',
    'RegistrationForm',
    'RegistrationWizard',
    'SignInPage',
    'resolve_page',
]
