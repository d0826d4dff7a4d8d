from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import require_positive_int
from ..common.view_state import FetchFailed, FetchStarted, FetchSucceeded, ViewState, reduce
from ..core.constants import DEFAULT_TARGET_DAYS
from ..core.enums import ExpiryStatus, RecurringFrequency
from ..core.exceptions import FetchError, InvalidDateError, ValidationError
from ..people.names import display_name, resolve_name
from .classifier import classify, watchlist_sort_key
from .model import ExpiryCounts, ExpiryRecord, TrackerSettings, TrackerUpdate, Watchlist
from .repository import ExpiryRepository
from .tracker import counts_from_summary, diff_tracker_settings, settings_from_payload, validate_tracker_update

logger = logging.getLogger(__name__)


def build_watchlist(
    records: Iterable[Mapping[str, Any]],
    *,
    target_days: int,
    today: date,
    recurring: RecurringFrequency = RecurringFrequency.MONTHLY,
) -> Watchlist:
    """Classify raw employee records and order them for the watchlist.

    Records whose end date is missing or unparseable are reported in
    `excluded_ids` instead of being given a made-up status.
    """

    threshold = require_positive_int(target_days, "target_days")
    entries: list[ExpiryRecord] = []
    excluded: list[Any] = []

    for raw in records:
        if not isinstance(raw, Mapping):
            raise ValidationError(f"Watchlist record must be an object, got {type(raw).__name__}")

        try:
            end = parse_iso_date(raw.get("end_date"))
        except InvalidDateError:
            logger.info("Excluding record %s from watchlist: end_date=%r", raw.get("id"), raw.get("end_date"))
            excluded.append(raw.get("id"))
            continue

        c = classify(end, threshold, today=today)
        first_name, last_name = resolve_name(raw)
        entries.append(
            ExpiryRecord(
                id=raw.get("id"),
                user_id=raw.get("user_id"),
                role=str(raw.get("role") or "employee"),
                name=display_name(raw),
                first_name=first_name,
                last_name=last_name,
                email=raw.get("email"),
                end_date=end,
                days_until_expiry=c.days_until_expiry,
                months_until_expiry=c.months_until_expiry,
                status=c.status,
                is_expiring_soon=c.days_until_expiry <= threshold,
            )
        )

    entries.sort(key=watchlist_sort_key)
    return Watchlist(target_days=threshold, recurring=recurring, entries=tuple(entries), excluded_ids=tuple(excluded))


def count_watchlist(watchlist: Watchlist) -> ExpiryCounts:
    by_status = {status: 0 for status in ExpiryStatus}
    for entry in watchlist.entries:
        by_status[entry.status] += 1
    return ExpiryCounts(
        total=len(watchlist.entries),
        expired=by_status[ExpiryStatus.EXPIRED],
        expiring_soon=by_status[ExpiryStatus.EXPIRING_SOON],
        safe=by_status[ExpiryStatus.SAFE],
        target_days=watchlist.target_days,
        recurring=watchlist.recurring,
    )


class ExpiryWatchlistService:
    """Use case: expiry watchlist, its counts, and tracker settings."""

    def __init__(
        self,
        expiry: ExpiryRepository,
        *,
        default_target_days: int = DEFAULT_TARGET_DAYS,
        today_provider: Optional[Callable[[], date]] = None,
    ):
        self._expiry = expiry
        self._default_target_days = require_positive_int(default_target_days, "default_target_days")
        self._today = today_provider or today_local

    def get_settings(self) -> TrackerSettings:
        return settings_from_payload(self._expiry.get_tracker(), default_target_days=self._default_target_days)

    def load_watchlist(self) -> ViewState[Watchlist]:
        state = reduce(ViewState.initial(Watchlist(target_days=self._default_target_days)), FetchStarted())
        try:
            settings = self.get_settings()
            watchlist = build_watchlist(
                self._expiry.list_employees(),
                target_days=settings.target_days,
                today=self._today(),
                recurring=settings.recurring,
            )
        except (FetchError, ValidationError) as e:
            logger.warning("Expiry watchlist unavailable: %s", e)
            return reduce(state, FetchFailed(str(e) or "Failed to fetch expiry watchlist data."))
        return reduce(state, FetchSucceeded(watchlist))

    def load_counts(self) -> ViewState[ExpiryCounts]:
        state = reduce(ViewState.initial(ExpiryCounts(target_days=self._default_target_days)), FetchStarted())
        try:
            counts = counts_from_summary(self._expiry.get_counts(), default_target_days=self._default_target_days)
        except (FetchError, ValidationError) as e:
            logger.warning("Expiry counts unavailable: %s", e)
            return reduce(state, FetchFailed(str(e) or "Failed to fetch expiry counts."))
        return reduce(state, FetchSucceeded(counts))

    def update_settings(self, changes: Mapping[str, Any]) -> TrackerUpdate:
        """Validate and apply a partial settings update.

        Returns the resulting settings with the field-level diff; nothing is
        sent to the API when no value changes.
        """

        update = validate_tracker_update(changes)
        current = self.get_settings()
        diff = diff_tracker_settings(current, update)
        if not diff:
            return TrackerUpdate(settings=current)

        payload = {
            c.field_name: c.new_value.value if isinstance(c.new_value, RecurringFrequency) else c.new_value
            for c in diff
        }

        saved = self._expiry.update_tracker(payload)
        if saved:
            settings = settings_from_payload(saved, default_target_days=self._default_target_days)
        else:
            settings = replace(current, **update)
        return TrackerUpdate(settings=settings, changes=diff)
