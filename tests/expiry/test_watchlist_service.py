from __future__ import annotations

from datetime import date

import pytest

from hr_console.core.enums import ExpiryStatus, RecurringFrequency
from hr_console.core.exceptions import AuthenticationError, FetchError
from hr_console.expiry.service import ExpiryWatchlistService, build_watchlist, count_watchlist



class InMemoryExpiry:
    def __init__(self, *, tracker=None, employees=None, counts=None):
        self.tracker = tracker
        self.employees = employees or []
        self.counts = counts
        self.updated = None

    def get_tracker(self):
        return self.tracker

    def list_employees(self):
        return self.employees

    def get_counts(self):
        return self.counts

    def update_tracker(self, payload):
        self.updated = dict(payload)
        return {**(self.tracker or {}), **payload}


class FailingExpiry(InMemoryExpiry):
    def __init__(self, exc):
        super().__init__()
        self._exc = exc

    def list_employees(self):
        raise self._exc

    def get_counts(self):
        raise self._exc


EMPLOYEES = [
    {"id": 1, "user_id": 11, "first_name": "Ana", "last_name": "Lopez", "email": "ana@x.io", "end_date": "2026-03-05"},
    {"id": 2, "user_id": 12, "name": "Binh Tran Van", "email": "binh@x.io", "end_date": "2026-03-02"},
    {"id": 3, "user_id": 13, "first_name": "Chi", "last_name": "Do", "end_date": None},
    {"id": 4, "user_id": 14, "first_name": "Dan", "last_name": "Ng", "end_date": "2026-02-28"},
    {"id": 5, "user_id": 15, "first_name": "Eve", "last_name": "Ho", "end_date": "2025-12-01"},
    {"id": 6, "user_id": 16, "first_name": "Fay", "last_name": "Le", "end_date": "garbage"},
    {"id": 7, "user_id": 17, "first_name": "Gus", "last_name": "Vo", "end_date": "2027-06-01"},
]


def test_watchlist_orders_by_months_then_days_and_excludes_bad_dates(fixed_today):
    wl = build_watchlist(EMPLOYEES, target_days=90, today=fixed_today)

    assert [e.id for e in wl.entries] == [5, 4, 2, 1, 7]
    assert wl.excluded_ids == (3, 6)


def test_watchlist_statuses_and_names(fixed_today):
    wl = build_watchlist(EMPLOYEES, target_days=90, today=fixed_today)
    by_id = {e.id: e for e in wl.entries}

    assert by_id[5].status == ExpiryStatus.EXPIRED
    assert by_id[5].is_expiring_soon is True
    assert by_id[2].status == ExpiryStatus.EXPIRING_SOON
    assert by_id[2].first_name == "Binh"
    assert by_id[2].last_name == "Tran Van"
    assert by_id[7].status == ExpiryStatus.SAFE
    assert by_id[7].is_expiring_soon is False
    assert by_id[1].name == "Ana Lopez"
    assert by_id[1].role == "employee"


def test_count_watchlist(fixed_today):
    wl = build_watchlist(EMPLOYEES, target_days=90, today=fixed_today, recurring=RecurringFrequency.WEEKLY)
    counts = count_watchlist(wl)

    assert counts.total == 5
    assert counts.expired == 1
    assert counts.expiring_soon == 3
    assert counts.safe == 1
    assert counts.attention == 4
    assert counts.recurring == RecurringFrequency.WEEKLY


def test_load_watchlist_uses_tracker_threshold():
    repo = InMemoryExpiry(
        tracker={"id": 1, "target_days": 30, "recurring": "weekly"},
        employees=[{"id": 1, "first_name": "A", "last_name": "B", "end_date": "2026-03-05"}],
    )
    svc = ExpiryWatchlistService(repo, today_provider=lambda: date(2026, 2, 1))

    state = svc.load_watchlist()

    assert state.error is None
    assert state.loading is False
    assert state.data.target_days == 30
    assert state.data.entries[0].status == ExpiryStatus.SAFE


def test_load_watchlist_without_tracker_row_uses_default():
    repo = InMemoryExpiry(employees=[{"id": 1, "end_date": "2026-03-05"}])
    svc = ExpiryWatchlistService(repo, today_provider=lambda: date(2026, 2, 1))

    state = svc.load_watchlist()

    assert state.data.target_days == 180
    assert state.data.entries[0].status == ExpiryStatus.EXPIRING_SOON


def test_load_watchlist_failure_surfaces_message_with_empty_list():
    svc = ExpiryWatchlistService(FailingExpiry(FetchError("Failed to fetch expiry watchlist data.")))

    state = svc.load_watchlist()

    assert state.error == "Failed to fetch expiry watchlist data."
    assert state.data.entries == ()
    assert state.loading is False


def test_authentication_errors_propagate():
    svc = ExpiryWatchlistService(FailingExpiry(AuthenticationError("expired")))

    with pytest.raises(AuthenticationError):
        svc.load_watchlist()


def test_load_counts_maps_api_summary():
    repo = InMemoryExpiry(
        counts={"total": 5, "expired": 1, "critical": 2, "warning": 1, "safe": 1, "target_days": 120, "recurring": "daily"}
    )
    state = ExpiryWatchlistService(repo).load_counts()

    assert state.data.expiring_soon == 3
    assert state.data.attention == 4
    assert state.data.target_days == 120
    assert state.data.recurring == RecurringFrequency.DAILY


def test_load_counts_failure():
    state = ExpiryWatchlistService(FailingExpiry(FetchError("Failed to fetch expiry counts."))).load_counts()

    assert state.error == "Failed to fetch expiry counts."
    assert state.data.total == 0


def test_tracker_row_with_non_numeric_id_is_reported():
    repo = InMemoryExpiry(
        tracker={"id": "abc", "target_days": 30},
        employees=[{"id": 1, "end_date": "2026-03-05"}],
    )

    state = ExpiryWatchlistService(repo).load_watchlist()

    assert "id" in state.error
    assert state.data.entries == ()


def test_tracker_row_that_is_not_an_object_is_reported():
    repo = InMemoryExpiry(tracker=[{"target_days": 30}], employees=[{"id": 1, "end_date": "2026-03-05"}])

    state = ExpiryWatchlistService(repo).load_watchlist()

    assert state.error
    assert state.data.entries == ()


def test_count_summary_that_is_not_an_object_is_reported():
    state = ExpiryWatchlistService(InMemoryExpiry(counts=[{"total": 3}])).load_counts()

    assert state.error
    assert state.data.total == 0
    assert state.loading is False
