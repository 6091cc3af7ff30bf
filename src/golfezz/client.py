"""
Application facade wiring the HTTP client, services and auth context.
"""

from golfezz.api.http_client import HttpClient
from golfezz.config.types import AppConfig
from golfezz.services.admin_service import AdminService
from golfezz.services.auth_context import AuthContext
from golfezz.services.auth_service import AuthService
from golfezz.services.booking_service import BookingService
from golfezz.services.course_service import CourseService
from golfezz.services.dashboard_service import DashboardService
from golfezz.services.range_service import RangeService
from golfezz.session import FileSessionStore
from golfezz.session import MemorySessionStore
from golfezz.session import SessionStore
from golfezz.utils.logging_utils import LoggerMixin


class GolfEzzClient(LoggerMixin):
    """Entry point bundling one HTTP client with every service."""
    
    def __init__(
        self,
        config: AppConfig | None = None,
        store: SessionStore | None = None,
        http_client: HttpClient | None = None
    ):
        """Initialize client.

        Args:
            config: Loaded configuration; defaults apply when omitted
            store: Session store; a file store at config.session_file when
                a config is given, else an in-memory store
            http_client: Prebuilt HTTP client, mainly for tests
        """
        super().__init__()
        self.config = config or AppConfig(global_config={})
        if http_client is None:
            if store is None:
                store = FileSessionStore(self.config.session_file) if config else MemorySessionStore()
            http_client = HttpClient(self.config.api_url, store=store, timeout=self.config.timeout)
        self.http = http_client
        
        self.auth_service = AuthService(self.http)
        self.courses = CourseService(self.http)
        self.bookings = BookingService(self.http)
        self.range = RangeService(self.http)
        self.dashboard = DashboardService(self.http)
        self.admin = AdminService(self.http)
        self.auth = AuthContext(self.auth_service)
        
        self.debug("Client ready", api_url=self.http.base_url)
    
    def close(self) -> None:
        self.http.close()
    
    def __enter__(self) -> 'GolfEzzClient':
        return self
    
    def __exit__(self, *exc_info: object) -> None:
        self.close()
