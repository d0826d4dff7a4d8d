from __future__ import annotations

from typing import Any, Mapping

from ..model import ChangeLogEntry
from .base import ChangeLogNormalizer, optional_text, parse_change_type


class DisplayEntryNormalizer(ChangeLogNormalizer):
    """Entries already shaped for the history drawer (camelCase keys)."""

    def normalize(self, raw: Mapping[str, Any], *, source: str = "") -> ChangeLogEntry:
        changed_at, changed_at_raw = self._timestamp(raw.get("changedAt"))
        return ChangeLogEntry(
            id=raw.get("id"),
            field=str(raw.get("field") or ""),
            old_value=optional_text(raw.get("oldValue")),
            new_value=optional_text(raw.get("newValue")),
            change_type=parse_change_type(raw.get("changeType")),
            changed_at=changed_at,
            changed_by=optional_text(raw.get("changedBy")),
            change_reason=optional_text(raw.get("changeReason")),
            source=source,
            changed_at_raw=changed_at_raw,
        )
