from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ...common.datetime_utils import parse_instant
from ...core.enums import ChangeType
from ..model import ChangeLogEntry

_CHANGE_TYPE_ALIASES = {"UPDATED": ChangeType.UPDATE}


def parse_change_type(value: Any) -> ChangeType:
    """Map any source's change/action type onto ChangeType; unknown -> UPDATE."""
    if not isinstance(value, str) or not value.strip():
        return ChangeType.UPDATE
    key = value.strip().upper()
    try:
        return ChangeType(key)
    except ValueError:
        return _CHANGE_TYPE_ALIASES.get(key, ChangeType.UPDATE)


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text != "" else None


def resolve_actor(raw: Mapping[str, Any]) -> Optional[str]:
    """Actor display name: name, else email, else a string `changed_by`."""
    for key in ("changed_by_name", "changed_by_email"):
        if raw.get(key):
            return str(raw[key])
    changed_by = raw.get("changed_by")
    if isinstance(changed_by, str) and changed_by:
        return changed_by
    return None


class ChangeLogNormalizer(ABC):
    """Strategy Pattern: turn one source's raw record into a ChangeLogEntry."""

    @abstractmethod
    def normalize(self, raw: Mapping[str, Any], *, source: str = "") -> ChangeLogEntry:
        raise NotImplementedError

    def _timestamp(self, value: Any):
        return parse_instant(value), optional_text(value)
