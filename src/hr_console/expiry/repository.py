from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class ExpiryRepository(Protocol):
    def get_tracker(self) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError

    def list_employees(self) -> Sequence[Mapping[str, Any]]:
        """Employees with an end date, as raw API records."""

        raise NotImplementedError

    def get_counts(self) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError

    def update_tracker(self, payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError
