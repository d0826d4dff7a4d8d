from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..api.client import ApiClient, unwrap_data
from ..core.exceptions import FetchError
from .repository import ExpiryRepository


def _as_row(value: Any, error_message: str) -> Optional[Mapping[str, Any]]:
    if value is None or isinstance(value, Mapping):
        return value
    raise FetchError(error_message)


class HttpExpiryRepository(ExpiryRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def get_tracker(self) -> Optional[Mapping[str, Any]]:
        payload = self._client.get("/expiration-tracker", error_message="Failed to fetch tracker settings.")
        return _as_row(unwrap_data(payload), "Failed to fetch tracker settings.")

    def list_employees(self) -> Sequence[Mapping[str, Any]]:
        payload = self._client.get(
            "/expiration-tracker/employees",
            error_message="Failed to fetch expiry watchlist data.",
        )
        records = unwrap_data(payload, [])
        if not isinstance(records, list):
            raise FetchError("Failed to fetch expiry watchlist data.")
        return records

    def get_counts(self) -> Optional[Mapping[str, Any]]:
        payload = self._client.get("/expiration-tracker/count", error_message="Failed to fetch expiry counts.")
        return _as_row(unwrap_data(payload), "Failed to fetch expiry counts.")

    def update_tracker(self, payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        response = self._client.put(
            "/expiration-tracker",
            json=dict(payload),
            error_message="Failed to update tracker settings.",
        )
        return _as_row(unwrap_data(response), "Failed to update tracker settings.")
