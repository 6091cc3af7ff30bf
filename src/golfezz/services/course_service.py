"""
Course service for the GolfEzz API.
"""

from typing import Any

from golfezz.models.responses import ApiResponse
from golfezz.services.base_service import BaseService


class CourseService(BaseService):
    """Course listings, conditions and course administration."""
    
    def get_courses(
        self,
        filters: dict[str, Any] | None = None,
        pagination: dict[str, int] | None = None
    ) -> ApiResponse:
        """Get courses with optional filters and pagination.
        
        Args:
            filters: Any of difficulty, min_price, max_price, search, amenities
            pagination: page and limit
        """
        filters = filters or {}
        pagination = pagination or {}
        params = self.build_params(
            page=pagination.get('page'),
            limit=pagination.get('limit'),
            difficulty=filters.get('difficulty'),
            minPrice=filters.get('min_price'),
            maxPrice=filters.get('max_price'),
            search=filters.get('search'),
            amenities=filters.get('amenities')
        )
        return self.client.get('/courses', params=params)
    
    def get_course(self, course_id: str) -> ApiResponse:
        return self.client.get(f'/courses/{course_id}')
    
    def get_course_conditions(self, course_id: str) -> ApiResponse:
        return self.client.get(f'/courses/{course_id}/conditions')
    
    def get_featured_courses(self) -> ApiResponse:
        return self.client.get('/courses/featured')
    
    def search_courses(self, query: str) -> ApiResponse:
        return self.client.get('/courses/search', params={'q': query})
    
    # Public, unauthenticated endpoints
    
    def get_public_courses(self) -> ApiResponse:
        return self.client.get('/public/courses')
    
    def get_public_course(self, course_id: str) -> ApiResponse:
        return self.client.get(f'/public/courses/{course_id}')
    
    def get_green_conditions(self) -> ApiResponse:
        return self.client.get('/public/green-conditions')
    
    # Admin
    
    def create_course(self, data: dict[str, Any]) -> ApiResponse:
        return self.client.post('/admin/courses', data)
    
    def update_course(self, course_id: str, data: dict[str, Any]) -> ApiResponse:
        return self.client.put(f'/admin/courses/{course_id}', data)
    
    def delete_course(self, course_id: str) -> ApiResponse:
        return self.client.delete(f'/admin/courses/{course_id}')
    
    def update_course_conditions(self, course_id: str, conditions: dict[str, Any]) -> ApiResponse:
        return self.client.put(f'/admin/courses/{course_id}/conditions', conditions)
