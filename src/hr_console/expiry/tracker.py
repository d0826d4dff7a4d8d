"""Expiration tracker settings: parsing, validation and change diffing."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..changelog.model import ChangeLogInput
from ..common.validators import as_count, optional_int, require_positive_int
from ..core.constants import DEFAULT_TARGET_DAYS
from ..core.enums import ChangeType, RecurringFrequency
from ..core.exceptions import ValidationError
from .model import ExpiryCounts, TrackerSettings

TRACKED_FIELDS = ("target_days", "recurring")


def parse_frequency(value: Any) -> RecurringFrequency:
    try:
        return RecurringFrequency(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(f.value for f in RecurringFrequency)
        raise ValidationError(f"recurring must be one of: {allowed}") from None


def settings_from_payload(
    raw: Optional[Mapping[str, Any]],
    *,
    default_target_days: int = DEFAULT_TARGET_DAYS,
) -> TrackerSettings:
    """Build settings from the API row; a missing row means defaults."""
    if not raw:
        return TrackerSettings(target_days=default_target_days)
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Tracker settings must be an object, got {type(raw).__name__}")

    tracker_id = raw.get("id")
    target_days = raw.get("target_days")
    recurring = raw.get("recurring")
    return TrackerSettings(
        id=optional_int(tracker_id, "id"),
        target_days=require_positive_int(target_days, "target_days") if target_days is not None else default_target_days,
        recurring=parse_frequency(recurring) if recurring else RecurringFrequency.MONTHLY,
    )


def validate_tracker_update(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a partial settings update; unknown keys are rejected."""
    unknown = set(changes) - set(TRACKED_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown tracker setting(s): {', '.join(sorted(unknown))}")

    out: dict[str, Any] = {}
    if changes.get("target_days") is not None:
        out["target_days"] = require_positive_int(changes["target_days"], "target_days")
    if changes.get("recurring") is not None:
        out["recurring"] = parse_frequency(changes["recurring"])
    return out


def diff_tracker_settings(current: TrackerSettings, update: Mapping[str, Any]) -> tuple[ChangeLogInput, ...]:
    """One UPDATE entry per field whose value actually changes."""
    changes: list[ChangeLogInput] = []
    for name in TRACKED_FIELDS:
        if name not in update:
            continue
        old = getattr(current, name)
        new = update[name]
        if old != new:
            changes.append(ChangeLogInput(field_name=name, old_value=old, new_value=new, change_type=ChangeType.UPDATE))
    return tuple(changes)


def counts_from_summary(raw: Optional[Mapping[str, Any]], *, default_target_days: int = DEFAULT_TARGET_DAYS) -> ExpiryCounts:
    """Read the API's count summary; its critical and warning buckets are both
    inside the alert window."""
    if not raw:
        return ExpiryCounts(target_days=default_target_days)
    if not isinstance(raw, Mapping):
        raise ValidationError(f"Expiry counts must be an object, got {type(raw).__name__}")

    recurring = raw.get("recurring")
    target_days = raw.get("target_days")
    return ExpiryCounts(
        total=as_count(raw.get("total"), "total"),
        expired=as_count(raw.get("expired"), "expired"),
        expiring_soon=as_count(raw.get("critical"), "critical") + as_count(raw.get("warning"), "warning"),
        safe=as_count(raw.get("safe"), "safe"),
        target_days=require_positive_int(target_days, "target_days") if target_days is not None else default_target_days,
        recurring=parse_frequency(recurring) if recurring else RecurringFrequency.MONTHLY,
    )
