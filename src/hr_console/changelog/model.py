from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import EPOCH
from ..core.enums import ChangeType


@dataclass(frozen=True)
class ChangeLogEntry:
    """One field-level change, normalized from any change-log source."""

    id: Any
    field: str
    old_value: Optional[str]
    new_value: Optional[str]
    change_type: ChangeType
    changed_at: Optional[datetime]
    changed_by: Optional[str] = None
    change_reason: Optional[str] = None
    source: str = ""
    # Timestamp exactly as received, kept for display when it did not parse.
    changed_at_raw: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.source}-{self.id}" if self.source else str(self.id)

    @property
    def sort_instant(self) -> datetime:
        return self.changed_at or EPOCH


@dataclass(frozen=True)
class ChangeLogSource:
    """A named batch of raw change-log records from one endpoint/section."""

    name: str
    records: Sequence[Any] = ()
    empty_label: str = "No changes recorded yet."
    title: str = ""


@dataclass(frozen=True)
class ChangeLogInput:
    """A change about to be recorded (settings diff, profile edit, ...)."""

    field_name: str
    old_value: Any = None
    new_value: Any = None
    change_type: ChangeType = ChangeType.UPDATE
    change_reason: Optional[str] = None


@dataclass(frozen=True)
class ChangeHistorySection:
    name: str
    empty_label: str
    count: int


@dataclass(frozen=True)
class ChangeHistory:
    title: str
    entries: tuple[ChangeLogEntry, ...] = ()
    sections: tuple[ChangeHistorySection, ...] = ()
