"""Expiry date classification.

All functions are pure over their inputs and `today`; callers that need the
real current date pass `today_local()`.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_TARGET_DAYS
from ..core.enums import ExpiryStatus
from .model import ExpiryClassification


def days_until(end: date, today: date) -> int:
    return (end - today).days


def months_until(end: date, today: date) -> int:
    # Calendar-month difference, day-of-month ignored: Jan 31 -> Feb 1 is one
    # month while Jan 1 -> Jan 31 is zero. The watchlist ordering relies on it.
    return (end.year - today.year) * 12 + (end.month - today.month)


def status_for(days_until_expiry: int, target_days: int) -> ExpiryStatus:
    if days_until_expiry < 0:
        return ExpiryStatus.EXPIRED
    if days_until_expiry <= target_days:
        return ExpiryStatus.EXPIRING_SOON
    return ExpiryStatus.SAFE


def classify(
    end_date: Any,
    target_days: int = DEFAULT_TARGET_DAYS,
    *,
    today: Optional[date] = None,
) -> ExpiryClassification:
    """Classify an end date against the alert window.

    Raises InvalidDateError when `end_date` is missing or unparseable; such
    records must be left out of the watchlist, never shown as safe.
    """

    end = parse_iso_date(end_date)
    threshold = require_positive_int(target_days, "target_days")
    today = today or today_local()

    days = days_until(end, today)
    return ExpiryClassification(
        days_until_expiry=days,
        months_until_expiry=months_until(end, today),
        status=status_for(days, threshold),
    )


def watchlist_sort_key(record) -> tuple[int, int]:
    return (record.months_until_expiry, record.days_until_expiry)
