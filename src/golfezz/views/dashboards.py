"""
Dashboard page loaders.
"""

from typing import TYPE_CHECKING

from golfezz.models.stats import DashboardStats
from golfezz.models.user import MembershipTier
from golfezz.routing import ADMIN_DASHBOARD_URL
from golfezz.routing import MEMBER_DASHBOARD_URL
from golfezz.routing import get_dashboard_url
from golfezz.routing import member_dashboard_url
from golfezz.views.base import Page
from golfezz.views.base import PageResult

if TYPE_CHECKING:
    from golfezz.client import GolfEzzClient


class DashboardPage(Page):
    """Sends the user to the dashboard matching their role and tier."""
    
    route = '/dashboard'
    
    def load(self) -> PageResult:
        self.ensure_auth_resolved()
        user = self.app.auth.user
        if user is None:
            return self.redirect_to_sign_in()
        return self.redirect(get_dashboard_url(user))


class MemberDashboardPage(Page):
    """Member dashboard, optionally restricted to one membership tier.
    
    Without a tier any member is accepted and a signed-in admin is sent
    to the admin dashboard. On a tier page a member of another tier, or a
    user who is not a member, is sent to sign in.
    """
    
    def __init__(self, app: 'GolfEzzClient', tier: MembershipTier | None = None):
        self.tier = tier
        self.route = member_dashboard_url(tier)
        super().__init__(app)
    
    def load(self) -> PageResult:
        self.ensure_auth_resolved()
        user = self.app.auth.user
        if user is None:
            return self.redirect_to_sign_in()
        if not user.is_member:
            if self.tier is None and user.is_admin:
                return self.redirect(ADMIN_DASHBOARD_URL)
            return self.redirect_to_sign_in()
        if self.tier is not None and user.tier != self.tier:
            return self.redirect_to_sign_in()
        
        bookings = self.app.bookings.fetch_user_bookings()
        stats_response = self.app.dashboard.get_stats()
        stats = DashboardStats.from_dict(stats_response.data if stats_response.success else None)
        
        error = bookings.error
        if error is None and not stats_response.success:
            error = stats_response.error
        
        return self.render(
            {
                'user': user,
                'tier': self.tier,
                'tee_time_bookings': bookings.tee_time_bookings,
                'range_bookings': bookings.range_bookings,
                'stats': stats,
            },
            error=error
        )


class AdminDashboardPage(Page):
    
    route = '/admin/dashboard'
    
    def load(self) -> PageResult:
        self.ensure_auth_resolved()
        user = self.app.auth.user
        if user is None:
            return self.redirect_to_sign_in()
        if not user.is_admin:
            return self.redirect(MEMBER_DASHBOARD_URL)
        
        response = self.app.admin.get_dashboard_stats()
        stats = DashboardStats.from_dict(response.data if response.success else None)
        return self.render(
            {'user': user, 'stats': stats},
            error=None if response.success else response.error
        )
