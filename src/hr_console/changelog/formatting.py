"""Display helpers for change-log entries.

Empty, missing and null values all render as the same explicit marker; the
literal strings "None", "null" or "undefined" never reach the UI.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional

from ..core.constants import EMPTY_VALUE_MARKER
from ..core.enums import ChangeType
from .model import ChangeHistory, ChangeLogEntry, ChangeLogInput

_LABELS = {
    ChangeType.CREATE: "Created",
    ChangeType.UPDATE: "Updated",
    ChangeType.DELETE: "Deleted",
    ChangeType.ASSIGNED: "Assigned",
    ChangeType.UNASSIGNED: "Unassigned",
}

_TONES = {
    ChangeType.CREATE: "added",
    ChangeType.ASSIGNED: "added",
    ChangeType.UPDATE: "changed",
    ChangeType.DELETE: "removed",
    ChangeType.UNASSIGNED: "removed",
}


def display_value(value: Optional[str]) -> str:
    if value is None or value == "":
        return EMPTY_VALUE_MARKER
    return str(value)


def change_type_label(change_type: ChangeType) -> str:
    return _LABELS.get(change_type, "Updated")


def change_type_tone(change_type: ChangeType) -> str:
    return _TONES.get(change_type, "changed")


def format_value(value: Any) -> Optional[str]:
    """Serialize a field value for storage in a change log."""
    if value is None:
        return None
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, default=str)
    return str(value)


def format_timestamp(entry: ChangeLogEntry) -> str:
    """`MM/DD/YYYY h:mm AM` for parsed timestamps, the raw text otherwise."""
    if entry.changed_at is None:
        return entry.changed_at_raw or ""
    stamp = entry.changed_at
    hour12 = stamp.hour % 12 or 12
    ampm = "PM" if stamp.hour >= 12 else "AM"
    return f"{stamp.month:02d}/{stamp.day:02d}/{stamp.year} {hour12}:{stamp.minute:02d} {ampm}"


def change_input_payload(change: ChangeLogInput) -> dict[str, Any]:
    return {
        "field_name": change.field_name,
        "old_value": format_value(change.old_value),
        "new_value": format_value(change.new_value),
        "change_type": change.change_type.value,
        "change_reason": change.change_reason,
    }


def entry_to_view(entry: ChangeLogEntry) -> dict[str, Any]:
    return {
        "key": entry.key,
        "id": entry.id,
        "source": entry.source,
        "field": entry.field,
        "old_value": entry.old_value,
        "new_value": entry.new_value,
        "old_display": display_value(entry.old_value),
        "new_display": display_value(entry.new_value),
        "change_type": entry.change_type.value,
        "label": change_type_label(entry.change_type),
        "tone": change_type_tone(entry.change_type),
        "changed_at": entry.changed_at.isoformat() if entry.changed_at else entry.changed_at_raw,
        "changed_at_display": format_timestamp(entry),
        "changed_by": entry.changed_by,
        "change_reason": entry.change_reason,
    }


def history_to_view(history: ChangeHistory) -> dict[str, Any]:
    return {
        "title": history.title,
        "entries": [entry_to_view(e) for e in history.entries],
        "sections": [{"name": s.name, "empty_label": s.empty_label, "count": s.count} for s in history.sections],
    }
