"""Per-view fetch state updated through a single reducer.

Each view owns one `ViewState`; services never mutate it in place, they feed
actions through `reduce` and keep the returned value.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ViewState(Generic[T]):
    data: T
    loading: bool = False
    error: Optional[str] = None
    empty: T = field(default=None, repr=False, compare=False)

    @classmethod
    def initial(cls, empty: T) -> "ViewState[T]":
        return cls(data=empty, loading=True, error=None, empty=empty)


@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchSucceeded:
    data: Any


@dataclass(frozen=True)
class FetchFailed:
    message: str


Action = Union[FetchStarted, FetchSucceeded, FetchFailed]


def reduce(state: ViewState[T], action: Action) -> ViewState[T]:
    if isinstance(action, FetchStarted):
        return replace(state, loading=True, error=None)
    if isinstance(action, FetchSucceeded):
        return replace(state, data=action.data, loading=False, error=None)
    if isinstance(action, FetchFailed):
        # A failed fetch never leaves stale rows next to the error message.
        return replace(state, data=state.empty, loading=False, error=action.message)
    raise TypeError(f"Unknown action: {action!r}")
