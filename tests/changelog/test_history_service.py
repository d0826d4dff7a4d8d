from __future__ import annotations

import pytest

from hr_console.changelog.service import ChangeHistoryService
from hr_console.core.exceptions import AuthenticationError, FetchError


class InMemoryChangeLogs:
    def __init__(self, user_logs=None, tracker_logs=None):
        self.user_logs = user_logs or {}
        self.tracker_logs = tracker_logs or []
        self.requested = []

    def get_user_change_logs(self, user_id):
        self.requested.append(user_id)
        return self.user_logs

    def list_tracker_change_logs(self):
        return self.tracker_logs


class FailingChangeLogs:
    def __init__(self, exc):
        self._exc = exc

    def get_user_change_logs(self, user_id):
        raise self._exc

    def list_tracker_change_logs(self):
        raise self._exc


def test_user_history_merges_all_sections():
    repo = InMemoryChangeLogs(
        user_logs={
            "changeLogs": [{"id": 1, "field_name": "email", "changed_at": "2024-01-02T00:00:00Z"}],
            "projectChangeLogs": [
                {"id": 1, "project_id": 4, "project_name": "Apollo", "action_type": "ASSIGNED", "changed_at": "2024-01-04T00:00:00Z"}
            ],
            "employeeChangeLogs": [{"id": 9, "field_name": "end_date", "changed_at": "2024-01-03T00:00:00Z"}],
        }
    )

    state = ChangeHistoryService(repo).user_history(42)

    assert repo.requested == [42]
    assert state.error is None
    assert [e.key for e in state.data.entries] == ["project-log-1", "employee-log-9", "user-log-1"]
    assert [(s.name, s.count) for s in state.data.sections] == [
        ("User Changes", 1),
        ("Project Assignments", 1),
        ("Employee Profile Changes", 1),
    ]
    assert state.data.title == "Change History"


def test_history_with_no_logs_is_empty_not_an_error():
    state = ChangeHistoryService(InMemoryChangeLogs()).user_history(1, title="Ana's history")

    assert state.error is None
    assert state.data.entries == ()
    assert state.data.title == "Ana's history"


def test_fetch_failure_gives_empty_feed_and_message():
    state = ChangeHistoryService(FailingChangeLogs(FetchError("Unable to load change history."))).user_history(1)

    assert state.error == "Unable to load change history."
    assert state.data.entries == ()
    assert state.loading is False


def test_malformed_record_is_reported_not_raised():
    repo = InMemoryChangeLogs(tracker_logs=[{"id": 1, "field_name": "target_days"}, "garbage"])

    state = ChangeHistoryService(repo).tracker_history()

    assert state.error
    assert state.data.entries == ()


def test_tracker_history():
    repo = InMemoryChangeLogs(
        tracker_logs=[
            {"id": 1, "field_name": "target_days", "old_value": "180", "new_value": "90", "changed_at": "2024-01-01T00:00:00Z"},
            {"id": 2, "field_name": "recurring", "old_value": "monthly", "new_value": "weekly", "changed_at": "2024-02-01T00:00:00Z"},
        ]
    )

    state = ChangeHistoryService(repo).tracker_history()

    assert [e.id for e in state.data.entries] == [2, 1]
    assert state.data.title == "Expiration Tracker History"


def test_authentication_error_propagates():
    with pytest.raises(AuthenticationError):
        ChangeHistoryService(FailingChangeLogs(AuthenticationError("expired"))).tracker_history()
