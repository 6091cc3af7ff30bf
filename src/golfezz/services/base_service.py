"""Base class for API resource services."""

from typing import Any

from golfezz.api.http_client import HttpClient
from golfezz.utils.logging_utils import LoggerMixin


class BaseService(LoggerMixin):
    """Base class for services wrapping one API resource."""
    
    def __init__(self, client: HttpClient):
        """Initialize service."""
        super().__init__()
        self.client = client
        self.set_log_context(service=self.__class__.__name__.lower())
    
    @staticmethod
    def build_params(**values: Any) -> dict[str, Any]:
        """Build a query dict from non-empty values.

        Lists are joined with commas.
        """
        params: dict[str, Any] = {}
        for key, value in values.items():
            if value is None or value == '' or value == []:
                continue
            if isinstance(value, (list, tuple)):
                value = ','.join(str(v) for v in value)
            params[key] = value
        return params
