"""Thin JSON client for the external HR REST API.

Every request carries `Authorization: Bearer <token>` when a token is
available. A 401 becomes `AuthenticationError` so the controllers can send the
operator back to `/login`; any other failure becomes `FetchError` carrying a
message that can be shown as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

import httpx

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import AuthenticationError, FetchError

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]

DEFAULT_ERROR_MESSAGE = "Request to the HR API failed."


def unwrap_data(payload: Any, default: Any = None) -> Any:
    """Return `payload["data"]` for `{success, data}` envelopes."""
    if isinstance(payload, Mapping) and payload.get("data") is not None:
        return payload["data"]
    return default


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, Mapping) and body.get("message"):
        return str(body["message"])
    return fallback


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = DEFAULT_API_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider or (lambda: None)
        self._timeout = float(timeout)
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.request(method, url, params=params, json=json, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise FetchError(error_message) from e

        if response.status_code == 401:
            raise AuthenticationError(_error_message(response, "Session expired, please sign in again."))

        if response.is_error:
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            raise FetchError(_error_message(response, error_message))

        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise FetchError(error_message) from e

    def get(self, path: str, *, params: Optional[Mapping[str, Any]] = None, error_message: str = DEFAULT_ERROR_MESSAGE) -> Any:
        return self.request("GET", path, params=params, error_message=error_message)

    def put(self, path: str, *, json: Any = None, error_message: str = DEFAULT_ERROR_MESSAGE) -> Any:
        return self.request("PUT", path, json=json, error_message=error_message)
