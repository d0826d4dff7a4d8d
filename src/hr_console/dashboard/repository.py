from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ..core.enums import TimeRange


class DashboardRepository(Protocol):
    def get_timesheet_stats(self, time_range: TimeRange) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError
