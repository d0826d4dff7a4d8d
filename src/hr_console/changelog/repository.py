from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class ChangeLogRepository(Protocol):
    """Port for reading change logs from the HR API.

    Note (DIP): services depend on this interface, never on the HTTP client.
    """

    def get_user_change_logs(self, user_id: int) -> Mapping[str, Sequence[Mapping[str, Any]]]:
        """Return `{changeLogs, projectChangeLogs, employeeChangeLogs}` arrays."""

        raise NotImplementedError

    def list_tracker_change_logs(self) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError
