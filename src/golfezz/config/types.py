"""Configuration type definitions."""

from dataclasses import dataclass
from typing import Optional, TypedDict

from golfezz.config.error_aggregator import ErrorAggregationConfig


class ApiConfig(TypedDict):
    """Backend API configuration."""
    url: str
    timeout: float

class LoggingConfig(TypedDict):
    """Logging configuration."""
    default_level: str
    verbose_level: str
    file: Optional[str]
    max_size: int  # in MB
    backup_count: int

class SessionConfig(TypedDict):
    """Session persistence configuration."""
    file: Optional[str]

class ErrorReportingConfig(TypedDict):
    """Error aggregation configuration."""
    enabled: bool
    error_threshold: int
    time_threshold: int

class GlobalConfig(TypedDict):
    """Global configuration structure."""
    api: ApiConfig
    session: SessionConfig
    logging: LoggingConfig
    errors: ErrorReportingConfig

@dataclass
class AppConfig:
    """Application configuration."""
    global_config: GlobalConfig
    api_url: str = "http://localhost:8080/api/v1"
    timeout: float = 10.0
    session_file: str = "session.json"
    config_dir: str = "config"
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @property
    def error_aggregation(self) -> ErrorAggregationConfig:
        """Aggregator settings from the errors section."""
        errors = self.global_config.get('errors') or {}
        return ErrorAggregationConfig(
            enabled=bool(errors.get('enabled', True)),
            error_threshold=int(errors.get('error_threshold', 5)),
            time_threshold=int(errors.get('time_threshold', 300))
        )
