from __future__ import annotations

import logging
from typing import Sequence

from ..common.view_state import FetchFailed, FetchStarted, FetchSucceeded, ViewState, reduce
from ..core.exceptions import FetchError, ValidationError
from .factory import ChangeLogNormalizerFactory
from .merger import merge_change_logs
from .model import ChangeHistory, ChangeHistorySection, ChangeLogSource
from .repository import ChangeLogRepository

logger = logging.getLogger(__name__)


class ChangeHistoryService:
    """Use case: build the change-history feed shown in the history drawer.

    Fetch or payload errors never escape: the view gets an empty feed plus the
    error message. AuthenticationError is the exception and propagates so the
    controller can redirect to the login page.
    """

    def __init__(self, logs: ChangeLogRepository, *, factory: ChangeLogNormalizerFactory | None = None):
        self._logs = logs
        self._factory = factory or ChangeLogNormalizerFactory()

    def build_history(self, title: str, sources: Sequence[ChangeLogSource]) -> ChangeHistory:
        entries = merge_change_logs(*sources, factory=self._factory)
        sections = tuple(
            ChangeHistorySection(name=s.title or s.name, empty_label=s.empty_label, count=len(s.records or ()))
            for s in sources
        )
        return ChangeHistory(title=title, entries=tuple(entries), sections=sections)

    def _load(self, title: str, fetch_sources) -> ViewState[ChangeHistory]:
        state = reduce(ViewState.initial(ChangeHistory(title=title)), FetchStarted())
        try:
            history = self.build_history(title, fetch_sources())
        except (FetchError, ValidationError) as e:
            logger.warning("Change history '%s' unavailable: %s", title, e)
            return reduce(state, FetchFailed(str(e) or "Unable to load change history."))
        return reduce(state, FetchSucceeded(history))

    def user_history(self, user_id: int, *, title: str | None = None) -> ViewState[ChangeHistory]:
        def fetch_sources():
            logs = self._logs.get_user_change_logs(user_id)
            return [
                ChangeLogSource(
                    name="user-log",
                    title="User Changes",
                    records=logs.get("changeLogs") or [],
                    empty_label="No changes recorded yet.",
                ),
                ChangeLogSource(
                    name="project-log",
                    title="Project Assignments",
                    records=logs.get("projectChangeLogs") or [],
                    empty_label="No project assignment changes recorded.",
                ),
                ChangeLogSource(
                    name="employee-log",
                    title="Employee Profile Changes",
                    records=logs.get("employeeChangeLogs") or [],
                    empty_label="No employee profile changes recorded.",
                ),
            ]

        return self._load(title or "Change History", fetch_sources)

    def tracker_history(self) -> ViewState[ChangeHistory]:
        def fetch_sources():
            return [
                ChangeLogSource(
                    name="tracker-log",
                    title="Tracker Settings",
                    records=self._logs.list_tracker_change_logs(),
                    empty_label="No settings changes recorded.",
                )
            ]

        return self._load("Expiration Tracker History", fetch_sources)
