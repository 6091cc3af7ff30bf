"""
Parsing helpers shared by the model classes.
"""

from enum import Enum
from typing import Any, TypeVar

from golfezz.exceptions import ValidationError

E = TypeVar('E', bound=Enum)


def parse_enum(enum_cls: type[E], value: Any, field_name: str) -> E:
    """Parse a raw value into a member of a closed enum.

    Args:
        enum_cls: Enum class to parse into
        value: Raw value from the API
        field_name: Field name used in the error message

    Returns:
        Enum member

    Raises:
        ValidationError: If the value is not one of the enum's values
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(str(member.value) for member in enum_cls)
        raise ValidationError(
            f"Invalid {field_name}: {value!r} (expected one of: {allowed})",
            details={'field': field_name, 'value': value}
        ) from None


def to_float(value: Any, default: float = 0.0) -> float:
    """Convert numeric API values, tolerating None and numeric strings."""
    if value is None or value == '':
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def to_int(value: Any, default: int = 0) -> int:
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_str(value: Any) -> str:
    """Normalize identifiers that arrive as numbers or strings."""
    return '' if value is None else str(value)
