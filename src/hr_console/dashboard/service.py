from __future__ import annotations

import logging
from typing import Any

from ..common.view_state import FetchFailed, FetchStarted, FetchSucceeded, ViewState, reduce
from ..core.exceptions import FetchError, ValidationError
from .aggregator import aggregate, aggregate_payload, parse_time_range
from .model import DashboardTotals
from .repository import DashboardRepository

logger = logging.getLogger(__name__)


class DashboardService:
    """Use case: dashboard overview; totals are recomputed on every load."""

    def __init__(self, stats: DashboardRepository):
        self._stats = stats

    def load(self, time_range: Any = None) -> ViewState[DashboardTotals]:
        # An invalid range is a caller error, not a fetch failure.
        selected = parse_time_range(time_range)

        state = reduce(ViewState.initial(aggregate((), time_range=selected)), FetchStarted())
        try:
            totals = aggregate_payload(self._stats.get_timesheet_stats(selected), time_range=selected)
        except (FetchError, ValidationError) as e:
            logger.warning("Dashboard statistics unavailable (range=%s): %s", selected.value, e)
            return reduce(state, FetchFailed(str(e) or "Failed to fetch dashboard statistics."))
        return reduce(state, FetchSucceeded(totals))
