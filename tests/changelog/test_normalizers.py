from __future__ import annotations

from datetime import date

import pytest

from hr_console.changelog.factory import ChangeLogNormalizerFactory
from hr_console.changelog.formatting import (
    change_type_label,
    change_type_tone,
    display_value,
    entry_to_view,
    format_timestamp,
    format_value,
)
from hr_console.changelog.normalizers.assignment_log import AssignmentChangeNormalizer
from hr_console.changelog.normalizers.base import parse_change_type, resolve_actor
from hr_console.changelog.normalizers.display_entry import DisplayEntryNormalizer
from hr_console.changelog.normalizers.field_log import FieldChangeNormalizer
from hr_console.core.enums import ChangeType, RecurringFrequency
from hr_console.core.exceptions import ValidationError



@pytest.mark.parametrize(
    "raw, expected",
    [
        ("CREATE", ChangeType.CREATE),
        ("create", ChangeType.CREATE),
        ("UPDATED", ChangeType.UPDATE),
        ("DELETE", ChangeType.DELETE),
        ("ASSIGNED", ChangeType.ASSIGNED),
        ("UNASSIGNED", ChangeType.UNASSIGNED),
        ("RENAMED", ChangeType.UPDATE),
        ("", ChangeType.UPDATE),
        (None, ChangeType.UPDATE),
    ],
)
def test_parse_change_type(raw, expected):
    assert parse_change_type(raw) == expected


def test_factory_picks_normalizer_by_vocabulary():
    factory = ChangeLogNormalizerFactory()

    assert isinstance(factory.for_record({"field_name": "email"}), FieldChangeNormalizer)
    assert isinstance(factory.for_record({"project_id": 3, "action_type": "ASSIGNED"}), AssignmentChangeNormalizer)
    assert isinstance(factory.for_record({"field": "email", "changedAt": "2024-01-01"}), DisplayEntryNormalizer)


def test_factory_rejects_non_objects():
    with pytest.raises(ValidationError):
        ChangeLogNormalizerFactory().for_record("not a record")


def test_field_log_normalization():
    entry = FieldChangeNormalizer().normalize(
        {
            "id": 4,
            "field_name": "email",
            "old_value": "",
            "new_value": "new@x.io",
            "change_type": "UPDATED",
            "change_reason": "typo",
            "changed_at": "2024-02-03T08:00:00Z",
            "changed_by_email": "admin@x.io",
        },
        source="user-log",
    )

    assert entry.field == "email"
    assert entry.old_value is None
    assert entry.new_value == "new@x.io"
    assert entry.change_type == ChangeType.UPDATE
    assert entry.changed_by == "admin@x.io"
    assert entry.change_reason == "typo"
    assert entry.key == "user-log-4"


def test_assignment_without_values_reads_assigned():
    normalizer = AssignmentChangeNormalizer()

    assigned = normalizer.normalize({"id": 1, "project_id": 7, "project_name": "Apollo", "action_type": "ASSIGNED"})
    removed = normalizer.normalize({"id": 2, "project_id": 7, "action_type": "UNASSIGNED"})

    assert assigned.field == "Project Apollo"
    assert assigned.old_value is None
    assert assigned.new_value == "Assigned"
    assert removed.field == "Project 7"
    assert removed.old_value == "Assigned"
    assert removed.new_value is None


def test_actor_precedence():
    assert resolve_actor({"changed_by_name": "Ana", "changed_by_email": "a@x.io", "changed_by": "x"}) == "Ana"
    assert resolve_actor({"changed_by_email": "a@x.io", "changed_by": "x"}) == "a@x.io"
    assert resolve_actor({"changed_by": "system"}) == "system"
    assert resolve_actor({"changed_by": 12}) is None


@pytest.mark.parametrize("value", [None, ""])
def test_empty_values_render_as_marker(value):
    assert display_value(value) == "Empty"


def test_entry_view_never_shows_null_strings():
    entry = FieldChangeNormalizer().normalize({"id": 1, "field_name": "phone", "old_value": None, "new_value": "0123"})
    view = entry_to_view(entry)

    assert view["old_display"] == "Empty"
    assert view["new_display"] == "0123"
    assert "None" not in (view["old_display"], view["new_display"])
    assert view["label"] == "Updated"
    assert view["tone"] == "changed"


def test_labels_and_tones():
    assert change_type_label(ChangeType.CREATE) == "Created"
    assert change_type_label(ChangeType.UNASSIGNED) == "Unassigned"
    assert change_type_tone(ChangeType.ASSIGNED) == "added"
    assert change_type_tone(ChangeType.DELETE) == "removed"


def test_format_value():
    assert format_value(None) is None
    assert format_value("x") == "x"
    assert format_value(90) == "90"
    assert format_value(RecurringFrequency.BI_WEEKLY) == "bi-weekly"
    assert format_value(date(2026, 3, 1)) == "2026-03-01"
    assert format_value({"a": 1}) == '{"a": 1}'


def test_format_timestamp():
    entry = FieldChangeNormalizer().normalize({"id": 1, "changed_at": "2024-01-03T14:05:00Z"})
    unparsed = FieldChangeNormalizer().normalize({"id": 2, "changed_at": "soon"})

    assert format_timestamp(entry) == "01/03/2024 2:05 PM"
    assert format_timestamp(unparsed) == "soon"


def test_null_change_type_falls_back_to_camel_case_key():
    entry = FieldChangeNormalizer().normalize({"id": 1, "field_name": "phone", "change_type": None, "changeType": "DELETE"})

    assert entry.change_type == ChangeType.DELETE
