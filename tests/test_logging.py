"""Tests for logging setup and error aggregation."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from golfezz.config.error_aggregator import ErrorAggregationConfig
from golfezz.config.error_aggregator import init_error_aggregator
from golfezz.config.logging import ColoredFormatter
from golfezz.config.logging import setup_logging
from golfezz.config.logging_filters import MASK
from golfezz.config.logging_filters import CorrelationFilter
from golfezz.config.logging_filters import SensitiveDataFilter
from golfezz.config.logging_filters import correlation_id
from golfezz.exceptions import AuthError
from golfezz.exceptions import handle_errors
from golfezz.utils.logging_utils import LoggerMixin


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


def make_record(msg, **extra_fields):
    record = logging.LogRecord("test", logging.INFO, __file__, 1, msg, None, None)
    if extra_fields:
        record.extra_fields = extra_fields
    return record


def test_sensitive_fields_masked():
    record = make_record("login", password="secret123", email="a@b.c", nested={"refresh_token": "r1"})
    SensitiveDataFilter().filter(record)
    assert record.extra_fields["password"] != "secret123"
    assert record.extra_fields["email"] == "a@b.c"
    assert record.extra_fields["nested"]["refresh_token"] != "r1"


def test_bearer_token_masked_in_message():
    record = make_record("Authorization: Bearer abc.def.ghi")
    SensitiveDataFilter().filter(record)
    assert "abc.def.ghi" not in record.getMessage()


def test_setup_logging_verbose_with_file(tmp_path):
    log_file = tmp_path / "golfezz.log"
    setup_logging(verbose=True, log_file=str(log_file))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_setup_logging_default_level():
    setup_logging()
    assert logging.getLogger().level == logging.WARNING


def test_handle_errors_records_and_reraises(monkeypatch):
    monkeypatch.setattr("golfezz.config.error_aggregator._error_aggregator", None)
    aggregator = init_error_aggregator(ErrorAggregationConfig(error_threshold=10))

    with pytest.raises(AuthError):
        with handle_errors(AuthError, "auth_context", "login"):
            raise AuthError("Login failed")

    assert sum(aggregator.pending().values()) == 1
    aggregator.shutdown()


def test_mixin_context_is_structured_and_masked():
    class Worker(LoggerMixin):
        pass

    worker = Worker()
    worker.set_log_context(service="auth")
    handler = RecordingHandler()
    handler.addFilter(SensitiveDataFilter())
    worker.logger.addHandler(handler)
    worker.logger.setLevel(logging.DEBUG)
    try:
        worker.info("Logging in", email="a@b.c", password="secret123")
    finally:
        worker.logger.removeHandler(handler)

    record = handler.records[0]
    assert record.getMessage() == "Logging in"
    assert record.extra_fields == {"service": "auth", "email": "a@b.c", "password": MASK}


def test_console_format_includes_correlation_id():
    token = correlation_id.set("abc123")
    try:
        record = make_record("Loaded dashboard", route="/dashboard")
        CorrelationFilter().filter(record)
    finally:
        correlation_id.reset(token)

    output = ColoredFormatter(use_color=False).format(record)
    assert "[abc123] test: Loaded dashboard" in output
    assert "route: /dashboard" in output
    assert "\033[" not in output


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_aggregator_reports_group_at_threshold(monkeypatch):
    monkeypatch.setattr("golfezz.config.error_aggregator._error_aggregator", None)
    aggregator = init_error_aggregator(ErrorAggregationConfig(error_threshold=2))
    reports = []
    monkeypatch.setattr(aggregator, "_report", reports.append)

    aggregator.add_error("Network error", "booking_service")
    assert reports == []
    aggregator.add_error("Network error", "course_service")

    assert len(reports) == 1
    assert reports[0].services == {"booking_service", "course_service"}
    assert aggregator.pending() == {}
