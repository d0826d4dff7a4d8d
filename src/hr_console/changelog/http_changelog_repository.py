from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..api.client import ApiClient, unwrap_data
from ..core.exceptions import FetchError
from .repository import ChangeLogRepository

USER_LOG_KEYS = ("changeLogs", "projectChangeLogs", "employeeChangeLogs")


def _as_records(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise FetchError(f"Unexpected {what} payload from the HR API.")
    return value


class HttpChangeLogRepository(ChangeLogRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get_user_change_logs(self, user_id: int) -> Mapping[str, Sequence[Mapping[str, Any]]]:
        payload = self._client.get(
            f"/users/{int(user_id)}/change-logs",
            error_message="Unable to load change history.",
        )
        if not isinstance(payload, Mapping):
            raise FetchError("Unexpected change history payload from the HR API.")
        return {key: _as_records(payload.get(key), "change history") for key in USER_LOG_KEYS}

    def list_tracker_change_logs(self) -> Sequence[Mapping[str, Any]]:
        payload = self._client.get(
            "/expiration-tracker/change-logs",
            error_message="Unable to load change history.",
        )
        return _as_records(unwrap_data(payload, []), "tracker history")
