"""Dashboard statistics service."""

from golfezz.models.responses import ApiResponse
from golfezz.services.base_service import BaseService


class DashboardService(BaseService):
    
    def get_stats(self) -> ApiResponse:
        return self.client.get('/dashboard/stats')
    
    def get_recent_activity(self) -> ApiResponse:
        return self.client.get('/dashboard/recent-activity')
