"""
Logging utilities for the GolfEzz client.

Context given to LoggerMixin travels in the record's extra_fields, where
SensitiveDataFilter masks credentials before any handler formats it.
"""

import logging
import time
from collections.abc import Callable
from functools import wraps
from inspect import signature
from typing import Any
from typing import TypeVar

from typing_extensions import ParamSpec


T = TypeVar('T')
P = ParamSpec('P')

def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)

def _call_arguments(func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
    bound = signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    return {k: v for k, v in bound.arguments.items() if k != 'self'}

def log_execution(level: str = 'DEBUG', include_args: bool = False) -> Callable[
    [Callable[P, T]], Callable[P, T]
]:
    """Decorator to log a call and how long it took.

    Args:
        level: Level name for the start and finish records
        include_args: Attach the bound arguments as fields; masked
            by SensitiveDataFilter like any other field
    """
    log_level = getattr(logging, level.upper())

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            fields: dict[str, Any] = {'call': func.__qualname__}
            if include_args:
                fields['arguments'] = _call_arguments(func, args, kwargs)
            logger.log(log_level, f"Calling {func.__qualname__}", extra={'extra_fields': dict(fields)})

            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                fields['duration_ms'] = round((time.perf_counter() - started) * 1000, 1)
                logger.error(f"{func.__qualname__} failed: {e}", exc_info=True, extra={'extra_fields': fields})
                raise
            fields['duration_ms'] = round((time.perf_counter() - started) * 1000, 1)
            logger.log(log_level, f"{func.__qualname__} completed", extra={'extra_fields': fields})
            return result

        return wrapper
    return decorator

class LoggerMixin:
    """Logging with per-instance context fields.

    Subclasses call set_log_context once, e.g. with the service name or
    page route, and every later record carries those fields.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(self.__class__.__module__)
        self._log_context: dict[str, Any] = {}

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def set_log_context(self, **kwargs: Any) -> None:
        """Set context values for all subsequent log messages."""
        self._log_context.update(kwargs)

    def clear_log_context(self) -> None:
        self._log_context.clear()

    def _log(self, level: int, msg: str, exc_info: Any = None, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        fields = {**self._log_context, **kwargs}
        self._logger.log(level, msg, exc_info=exc_info, extra={'extra_fields': fields} if fields else None)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, exc_info: Any = None, **kwargs: Any) -> None:
        """Log an error; exc_info takes True or an exception instance."""
        self._log(logging.ERROR, msg, exc_info=exc_info, **kwargs)
