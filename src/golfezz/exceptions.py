"""Centralized error definitions for the GolfEzz client."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from golfezz.config.error_aggregator import aggregate_error
from golfezz.error_codes import ErrorCode


logger = logging.getLogger(__name__)

@dataclass
class GolfEzzError(Exception):
    """Base exception for all GolfEzz errors.

    The HTTP layer never raises these; failed calls come back as
    ApiResponse envelopes. They surface from auth flows, payload
    parsing and configuration.
    """
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class AuthError(GolfEzzError):
    """Sign-in, registration or profile update failed."""
    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.AUTH_FAILED
    ):
        super().__init__(message, code, details)

class ConfigError(GolfEzzError):
    """Configuration error."""
    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.CONFIG_INVALID
    ):
        super().__init__(message, code, details)

class ValidationError(GolfEzzError):
    """A payload value is outside its closed set."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED, details)

@contextmanager
def handle_errors(
    error_type: type[GolfEzzError],
    service: str,
    operation: str
) -> Iterator[None]:
    """Record errors raised inside the block and re-raise them.
    
    Args:
        error_type: The expected error type
        service: The service name
        operation: The operation name
    """
    try:
        yield
    except error_type as e:
        aggregate_error(str(e), service, e.__traceback__)
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error in {service}.{operation}: {e}",
            exc_info=True
        )
        aggregate_error(str(e), service, e.__traceback__)
        raise
