"""Error aggregation and reporting utilities.

Repeated failures (an unreachable backend, an expired session) are
grouped by message and logged once per group instead of once per call.
"""

import logging
import threading
import time
import traceback
from dataclasses import dataclass, field
from types import TracebackType


@dataclass
class ErrorAggregationConfig:
    """Error aggregation configuration."""
    enabled: bool = True
    error_threshold: int = 5
    time_threshold: int = 300

@dataclass
class ErrorGroup:
    """Occurrences of one error message."""
    message: str
    count: int = 0
    first_seen: float = field(default_factory=time.monotonic)
    services: set[str] = field(default_factory=set)
    last_trace: str | None = None

    def add(self, service: str, stack_trace: str | None = None) -> None:
        self.count += 1
        self.services.add(service)
        if stack_trace:
            self.last_trace = stack_trace

    def age(self) -> float:
        return time.monotonic() - self.first_seen


class ErrorAggregator:
    """Groups errors by message and reports a group once it is due.

    A group is due when it reaches error_threshold occurrences or is
    older than time_threshold seconds. shutdown reports what is left.
    """

    def __init__(self, config: ErrorAggregationConfig):
        self._config = config
        self._groups: dict[str, ErrorGroup] = {}
        self._lock = threading.Lock()
        self.logger = logging.getLogger('golfezz.errors')

    def add_error(
        self,
        message: str,
        service: str,
        stack_trace: str | None = None
    ) -> None:
        """Record one occurrence, reporting the group if it became due."""
        if not self._config.enabled:
            return

        with self._lock:
            group = self._groups.setdefault(message, ErrorGroup(message=message))
            group.add(service, stack_trace)
            if group.count >= self._config.error_threshold or group.age() >= self._config.time_threshold:
                del self._groups[message]
            else:
                group = None

        if group is not None:
            self._report(group)

    def pending(self) -> dict[str, int]:
        """Return counts of errors not yet reported."""
        with self._lock:
            return {message: group.count for message, group in self._groups.items()}

    def _report(self, group: ErrorGroup) -> None:
        self.logger.error(
            f"{group.message} (seen {group.count} times)",
            extra={'extra_fields': {
                'services': sorted(group.services),
                'count': group.count,
                'window_seconds': round(group.age(), 1)
            }}
        )
        if group.last_trace:
            self.logger.debug(f"Last stack trace:\n{group.last_trace}")

    def shutdown(self) -> None:
        """Report any remaining errors."""
        with self._lock:
            groups = list(self._groups.values())
            self._groups.clear()
        for group in groups:
            self._report(group)

# Global error aggregator instance
_error_aggregator: ErrorAggregator | None = None

def init_error_aggregator(config: ErrorAggregationConfig) -> ErrorAggregator:
    """Initialize the global error aggregator and return it."""
    global _error_aggregator
    _error_aggregator = ErrorAggregator(config)
    return _error_aggregator

def get_error_aggregator() -> ErrorAggregator | None:
    """Get global error aggregator instance, if initialized."""
    return _error_aggregator

def aggregate_error(
    message: str,
    service: str,
    tb: TracebackType | None = None
) -> None:
    """Add error to global aggregator.

    Errors are dropped when no aggregator has been initialized.

    Args:
        message: Error message
        service: Service where error occurred
        tb: Optional traceback object
    """
    aggregator = get_error_aggregator()
    if aggregator is None:
        return
    stack_trace = "".join(traceback.format_tb(tb)) if tb is not None else None
    aggregator.add_error(message, service, stack_trace)
