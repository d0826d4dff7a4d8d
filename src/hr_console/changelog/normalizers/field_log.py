from __future__ import annotations

from typing import Any, Mapping

from ..model import ChangeLogEntry
from .base import ChangeLogNormalizer, optional_text, parse_change_type, resolve_actor


class FieldChangeNormalizer(ChangeLogNormalizer):
    """User, employee, project and tracker logs (`field_name` / `change_type`)."""

    def normalize(self, raw: Mapping[str, Any], *, source: str = "") -> ChangeLogEntry:
        changed_at, changed_at_raw = self._timestamp(raw.get("changed_at"))
        return ChangeLogEntry(
            id=raw.get("id"),
            field=str(raw.get("field_name") or raw.get("field") or ""),
            old_value=optional_text(raw.get("old_value")),
            new_value=optional_text(raw.get("new_value")),
            change_type=parse_change_type(raw.get("change_type") or raw.get("changeType")),
            changed_at=changed_at,
            changed_by=resolve_actor(raw),
            change_reason=optional_text(raw.get("change_reason")),
            source=source,
            changed_at_raw=changed_at_raw,
        )
