"""
Response envelopes returned by the HTTP client.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from golfezz.models.mixins import to_int

T = TypeVar('T')


@dataclass
class ApiResponse:
    """Uniform result of every API call.

    A failed call carries an error message and never raises.
    """
    success: bool
    data: Any = None
    error: str | None = None
    message: str | None = None
    status_code: int | None = field(default=None, compare=False)

    @classmethod
    def ok(cls, data: Any = None, message: str | None = None, status_code: int | None = None) -> 'ApiResponse':
        return cls(success=True, data=data, message=message, status_code=status_code)

    @classmethod
    def fail(cls, error: str, status_code: int | None = None) -> 'ApiResponse':
        return cls(success=False, error=error, status_code=status_code)

    @classmethod
    def from_body(cls, body: dict[str, Any], status_code: int | None = None) -> 'ApiResponse':
        """Build an envelope from a body that already has a success key."""
        return cls(
            success=bool(body.get('success')),
            data=body.get('data'),
            error=body.get('error'),
            message=body.get('message'),
            status_code=status_code
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {'success': self.success}
        if self.data is not None:
            result['data'] = self.data
        if self.error is not None:
            result['error'] = self.error
        if self.message is not None:
            result['message'] = self.message
        return result


@dataclass
class PaginatedResponse(Generic[T]):
    """One page of a listing.

    The backend uses two shapes: a flat one with total, page, limit and
    total_pages next to data, and a nested one with a pagination object.
    """
    items: list[T]
    total: int = 0
    page: int = 1
    limit: int = 0
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: Any, item_parser: Callable[[dict[str, Any]], T]) -> 'PaginatedResponse[T]':
        """
        Parse a paginated payload.

        Args:
            data: Payload in flat or nested shape, or a bare list
            item_parser: Callable that parses one item

        Returns:
            PaginatedResponse instance
        """
        if isinstance(data, list):
            items = [item_parser(item) for item in data]
            return cls(items=items, total=len(items), page=1, limit=len(items), total_pages=1 if items else 0)

        if not isinstance(data, dict):
            return cls(items=[])

        items = [item_parser(item) for item in data.get('data') or []]
        meta = data.get('pagination')
        if isinstance(meta, dict):
            total_pages = meta.get('totalPages', meta.get('total_pages'))
        else:
            meta = data
            total_pages = data.get('total_pages')

        return cls(
            items=items,
            total=to_int(meta.get('total'), len(items)),
            page=to_int(meta.get('page'), 1),
            limit=to_int(meta.get('limit'), len(items)),
            total_pages=to_int(total_pages)
        )

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
