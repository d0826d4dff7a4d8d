from __future__ import annotations

from typing import Any, Mapping

from ...core.enums import ChangeType
from ..model import ChangeLogEntry
from .base import ChangeLogNormalizer, optional_text, parse_change_type, resolve_actor

ASSIGNED_MARKER = "Assigned"


class AssignmentChangeNormalizer(ChangeLogNormalizer):
    """Project assignment events (`project_id` / `action_type`)."""

    def normalize(self, raw: Mapping[str, Any], *, source: str = "") -> ChangeLogEntry:
        change_type = parse_change_type(raw.get("action_type"))
        old_value = optional_text(raw.get("old_value"))
        new_value = optional_text(raw.get("new_value"))

        # Assignment rows often carry no values; show which side held the assignment.
        if old_value is None and change_type == ChangeType.UNASSIGNED:
            old_value = ASSIGNED_MARKER
        if new_value is None and change_type == ChangeType.ASSIGNED:
            new_value = ASSIGNED_MARKER

        project = raw.get("project_name") or raw.get("project_id")
        changed_at, changed_at_raw = self._timestamp(raw.get("changed_at"))
        return ChangeLogEntry(
            id=raw.get("id"),
            field=f"Project {project}" if project is not None else "Project",
            old_value=old_value,
            new_value=new_value,
            change_type=change_type,
            changed_at=changed_at,
            changed_by=resolve_actor(raw),
            change_reason=optional_text(raw.get("change_reason")),
            source=source,
            changed_at_raw=changed_at_raw,
        )
