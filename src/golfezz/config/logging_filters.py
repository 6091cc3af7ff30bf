"""Logging filters: credential masking and per-command correlation IDs."""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Any


correlation_id: ContextVar[str] = ContextVar('correlation_id', default='')

MASK = '***MASKED***'

DEFAULT_SENSITIVE_FIELDS = frozenset({
    'password', 'confirm_password', 'old_password', 'new_password',
    'token', 'refresh_token', 'authorization', 'secret'
})

BEARER_PATTERN = re.compile(r'(Bearer\s+)[A-Za-z0-9\-._~+/]+=*')


def new_correlation_id() -> str:
    """Start a new correlation ID for the current command."""
    value = uuid.uuid4().hex[:12]
    correlation_id.set(value)
    return value


class SensitiveDataFilter(logging.Filter):
    """Mask credentials in structured fields and bearer headers in messages."""

    def __init__(self, sensitive_fields: set[str] | frozenset[str] | None = None):
        super().__init__()
        self.sensitive_fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def _mask(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {
                k: MASK if str(k).lower() in self.sensitive_fields else self._mask(v)
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [self._mask(item) for item in obj]
        return obj

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, 'extra_fields'):
            record.extra_fields = self._mask(record.extra_fields)
        if isinstance(record.msg, str) and 'Bearer' in record.msg:
            record.msg = BEARER_PATTERN.sub(rf'\g<1>{MASK}', record.msg)
        return True


class CorrelationFilter(logging.Filter):
    """Stamp records with the current correlation ID, when one is set."""

    def filter(self, record: logging.LogRecord) -> bool:
        value = correlation_id.get()
        if value:
            record.extra_fields = {**getattr(record, 'extra_fields', {}), 'correlation_id': value}
        return True
