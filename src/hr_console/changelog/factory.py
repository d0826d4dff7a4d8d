from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.exceptions import ValidationError
from .normalizers.assignment_log import AssignmentChangeNormalizer
from .normalizers.base import ChangeLogNormalizer
from .normalizers.display_entry import DisplayEntryNormalizer
from .normalizers.field_log import FieldChangeNormalizer


@dataclass
class ChangeLogNormalizerFactory:
    """Factory Pattern: pick the normalizer matching a record's vocabulary.

    This is the only place that looks at raw key names.
    """

    def for_record(self, raw: Any) -> ChangeLogNormalizer:
        if not isinstance(raw, Mapping):
            raise ValidationError(f"Change-log record must be an object, got {type(raw).__name__}")

        if "action_type" in raw or ("project_id" in raw and "field_name" not in raw):
            return AssignmentChangeNormalizer()
        if "changedAt" in raw or "oldValue" in raw or "newValue" in raw:
            return DisplayEntryNormalizer()
        return FieldChangeNormalizer()
