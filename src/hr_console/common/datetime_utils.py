from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

from ..core.exceptions import InvalidDateError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _from_iso(value: str) -> datetime:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_iso_date(value: Any) -> date:
    """Parse a calendar date from `YYYY-MM-DD` or an ISO timestamp.

    The API serializes DATE columns either way; for timestamps the date part
    is taken as written, without shifting time zones.
    """
    if value is None:
        raise InvalidDateError("Missing date")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"Invalid date: {value!r}")

    try:
        return _from_iso(value).date()
    except ValueError:
        raise InvalidDateError(f"Invalid date: {value!r}") from None


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse a timestamp into an aware datetime; naive values are read as UTC.

    Returns None when the value is missing or unparseable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = _from_iso(value)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def today_local() -> date:
    """Today's date in local time (i.e. now at local midnight).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
