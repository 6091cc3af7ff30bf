"""
GolfEzz golf course client.
"""

__version__ = '0.1.0'

from .exceptions import AuthError, ConfigError, GolfEzzError, ValidationError

__all__ = [
    'AuthError',
    'ConfigError',
    'GolfEzzError',
    'ValidationError',
    '__version__',
]
