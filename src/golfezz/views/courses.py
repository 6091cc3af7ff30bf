"""Public course listing page."""

from golfezz.models.course import Course
from golfezz.models.course import GreenCondition
from golfezz.models.responses import PaginatedResponse
from golfezz.views.base import Page
from golfezz.views.base import PageResult


class CoursesPage(Page):
    
    route = '/courses'
    
    def load(self) -> PageResult:
        errors: list[str] = []
        courses: list[Course] = []
        conditions: list[GreenCondition] = []
        
        courses_response = self.app.courses.get_public_courses()
        if courses_response.success:
            courses = PaginatedResponse.from_dict(courses_response.data, Course.from_dict).items
        else:
            errors.append(courses_response.error or 'Failed to load courses')
        
        conditions_response = self.app.courses.get_green_conditions()
        if conditions_response.success:
            conditions = PaginatedResponse.from_dict(conditions_response.data, GreenCondition.from_dict).items
        else:
            errors.append(conditions_response.error or 'Failed to load green conditions')
        
        return self.render(
            {'courses': courses, 'green_conditions': conditions},
            error=errors[0] if errors else None
        )
