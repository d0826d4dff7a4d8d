from __future__ import annotations

from enum import Enum


class ExpiryStatus(str, Enum):
    """Tri-state expiry status of an employee contract or visa."""

    EXPIRED = "expired"
    EXPIRING_SOON = "expiring_soon"
    SAFE = "safe"


class ChangeType(str, Enum):
    """Change type shared by every change-log source after normalization."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ASSIGNED = "ASSIGNED"
    UNASSIGNED = "UNASSIGNED"


class RecurringFrequency(str, Enum):
    """How often the expiration tracker sends reminders."""

    DAILY = "daily"
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    BI_MONTHLY = "bi-monthly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"


class TimeRange(str, Enum):
    """Reporting window of the dashboard statistics."""

    CURRENT = "current"
    LAST_WEEK = "last-week"
    LAST_MONTH = "last-month"
    LAST_QUARTER = "last-quarter"
