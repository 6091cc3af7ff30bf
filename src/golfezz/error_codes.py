"""Error codes for the GolfEzz client."""

from enum import Enum

class ErrorCode(Enum):
    """Codes carried by GolfEzzError and its subclasses."""
    # Sign-in and session
    AUTH_FAILED = "auth_failed"
    MISSING_USER = "missing_user"
    UNKNOWN_ROLE = "unknown_role"
    
    # Payloads
    VALIDATION_FAILED = "validation_failed"
    
    # Configuration
    CONFIG_INVALID = "config_invalid"
    CONFIG_UNREADABLE = "config_unreadable"
