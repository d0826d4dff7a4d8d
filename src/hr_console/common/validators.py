from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def _whole_number(value: Any) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(value)
    return int(value)


def require_positive_int(value: Any, field_name: str) -> int:
    try:
        number = _whole_number(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer") from None
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number


def optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return _whole_number(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}") from None


def as_count(value: Any, field_name: str) -> int:
    """Coerce an API counter to int; missing values count as 0."""
    if value is None or value == "":
        return 0
    try:
        return _whole_number(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a whole number: {value!r}") from None
