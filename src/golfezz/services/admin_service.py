"""
Administration service for the GolfEzz API.
"""

from typing import Any

from golfezz.models.responses import ApiResponse
from golfezz.services.base_service import BaseService


class AdminService(BaseService):
    """Admin-only analytics, user, booking, pricing and system calls."""
    
    EXPORT_TYPES = ('users', 'bookings', 'revenue', 'all')
    EXPORT_FORMATS = ('csv', 'json', 'xlsx')
    
    # Analytics
    
    def get_dashboard_stats(self) -> ApiResponse:
        return self.client.get('/admin/dashboard/stats')
    
    def get_revenue_report(self, start_date: str | None = None, end_date: str | None = None) -> ApiResponse:
        return self.client.get(
            '/admin/reports/revenue',
            params=self.build_params(startDate=start_date, endDate=end_date)
        )
    
    def get_booking_analytics(self, course_id: str | None = None) -> ApiResponse:
        return self.client.get('/admin/analytics/bookings', params=self.build_params(courseId=course_id))
    
    # Users
    
    def get_users(
        self,
        filters: dict[str, Any] | None = None,
        page: int = 1,
        limit: int = 20
    ) -> ApiResponse:
        """List users.
        
        Args:
            filters: Any of role, membership_type, status, search
            page: Page number
            limit: Page size
        """
        filters = filters or {}
        params = self.build_params(
            page=page,
            limit=limit,
            role=filters.get('role'),
            membershipType=filters.get('membership_type'),
            status=filters.get('status'),
            search=filters.get('search')
        )
        return self.client.get('/admin/users', params=params)
    
    def get_user(self, user_id: str) -> ApiResponse:
        return self.client.get(f'/admin/users/{user_id}')
    
    def update_user_role(self, user_id: str, role: str) -> ApiResponse:
        return self.client.patch(f'/admin/users/{user_id}/role', {'role': role})
    
    def update_user_status(self, user_id: str, status: str) -> ApiResponse:
        return self.client.put(f'/admin/users/{user_id}/status', {'status': status})
    
    def delete_user(self, user_id: str) -> ApiResponse:
        return self.client.delete(f'/admin/users/{user_id}')
    
    def get_user_bookings(self, user_id: str) -> ApiResponse:
        return self.client.get(f'/admin/users/{user_id}/bookings')
    
    # Bookings
    
    def get_all_bookings(
        self,
        filters: dict[str, Any] | None = None,
        page: int = 1,
        limit: int = 20
    ) -> ApiResponse:
        filters = filters or {}
        params = self.build_params(
            page=page,
            limit=limit,
            status=filters.get('status'),
            courseId=filters.get('course_id'),
            dateFrom=filters.get('date_from'),
            dateTo=filters.get('date_to'),
            userId=filters.get('user_id')
        )
        return self.client.get('/admin/bookings', params=params)
    
    def cancel_booking(self, booking_id: str, reason: str | None = None) -> ApiResponse:
        return self.client.patch(f'/admin/bookings/{booking_id}/cancel', {'reason': reason})
    
    def confirm_booking(self, booking_id: str) -> ApiResponse:
        return self.client.patch(f'/admin/bookings/{booking_id}/confirm')
    
    # Pricing
    
    def get_pricing(self, course_id: str) -> ApiResponse:
        return self.client.get(f'/admin/courses/{course_id}/pricing')
    
    def update_pricing(self, pricing_id: str, data: dict[str, Any]) -> ApiResponse:
        return self.client.put(f'/admin/pricing/{pricing_id}', data)
    
    # System
    
    def get_system_logs(self, page: int = 1, limit: int = 50, level: str | None = None) -> ApiResponse:
        return self.client.get('/admin/logs', params=self.build_params(page=page, limit=limit, level=level))
    
    def get_system_status(self) -> ApiResponse:
        return self.client.get('/admin/system/status')
    
    def export_data(self, export_type: str, export_format: str = 'csv') -> ApiResponse:
        """Request a data export.
        
        Args:
            export_type: One of users, bookings, revenue, all
            export_format: One of csv, json, xlsx
            
        Returns:
            Envelope whose data holds the download URL
        """
        return self.client.post('/admin/export', {'type': export_type, 'format': export_format})
