from __future__ import annotations

from typing import Any, Mapping, Optional

from ..api.client import ApiClient, unwrap_data
from ..core.enums import TimeRange
from .repository import DashboardRepository


class HttpDashboardRepository(DashboardRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get_timesheet_stats(self, time_range: TimeRange) -> Optional[Mapping[str, Any]]:
        payload = self._client.get(
            "/dashboard/timesheet-stats",
            params={"range": time_range.value},
            error_message="Failed to fetch dashboard statistics.",
        )
        return unwrap_data(payload)
