from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..changelog.model import ChangeLogInput
from ..core.constants import DEFAULT_TARGET_DAYS
from ..core.enums import ExpiryStatus, RecurringFrequency


@dataclass(frozen=True)
class ExpiryClassification:
    days_until_expiry: int
    months_until_expiry: int
    status: ExpiryStatus


@dataclass(frozen=True)
class ExpiryRecord:
    """Watchlist row: one employee with a classified contract/visa end date."""

    id: int
    user_id: Any
    role: str
    name: str
    first_name: str
    last_name: str
    email: Optional[str]
    end_date: date
    days_until_expiry: int
    months_until_expiry: int
    status: ExpiryStatus
    # Within the alert window, expired rows included.
    is_expiring_soon: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "role": self.role,
            "name": self.name,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "end_date": self.end_date.isoformat(),
            "days_until_expiry": self.days_until_expiry,
            "months_until_expiry": self.months_until_expiry,
            "status": self.status.value,
            "is_expiring_soon": self.is_expiring_soon,
        }


@dataclass(frozen=True)
class TrackerSettings:
    id: Optional[int] = None
    target_days: int = DEFAULT_TARGET_DAYS
    recurring: RecurringFrequency = RecurringFrequency.MONTHLY

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "target_days": self.target_days, "recurring": self.recurring.value}


@dataclass(frozen=True)
class ExpiryCounts:
    total: int = 0
    expired: int = 0
    expiring_soon: int = 0
    safe: int = 0
    target_days: int = DEFAULT_TARGET_DAYS
    recurring: RecurringFrequency = RecurringFrequency.MONTHLY

    @property
    def attention(self) -> int:
        """Employees needing action: expired or inside the alert window."""
        return self.expired + self.expiring_soon

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "expired": self.expired,
            "expiring_soon": self.expiring_soon,
            "safe": self.safe,
            "attention": self.attention,
            "target_days": self.target_days,
            "recurring": self.recurring.value,
        }


@dataclass(frozen=True)
class Watchlist:
    target_days: int
    recurring: RecurringFrequency = RecurringFrequency.MONTHLY
    entries: tuple[ExpiryRecord, ...] = ()
    # Records left out because their end date was missing or unparseable.
    excluded_ids: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_days": self.target_days,
            "recurring": self.recurring.value,
            "entries": [e.to_dict() for e in self.entries],
            "excluded_ids": list(self.excluded_ids),
        }


@dataclass(frozen=True)
class TrackerUpdate:
    settings: TrackerSettings
    changes: tuple[ChangeLogInput, ...] = ()
