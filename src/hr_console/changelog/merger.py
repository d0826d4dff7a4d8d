"""Merge change-log sources into one reverse-chronological feed."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence, Union

from .factory import ChangeLogNormalizerFactory
from .model import ChangeLogEntry, ChangeLogSource

SourceLike = Union[ChangeLogSource, Sequence[Any]]


def normalize_records(
    records: Iterable[Any],
    *,
    source: str = "",
    factory: Optional[ChangeLogNormalizerFactory] = None,
) -> list[ChangeLogEntry]:
    factory = factory or ChangeLogNormalizerFactory()
    out: list[ChangeLogEntry] = []
    for raw in records or ():
        if isinstance(raw, ChangeLogEntry):
            out.append(raw)
            continue
        out.append(factory.for_record(raw).normalize(raw, source=source))
    return out


def sort_entries(entries: Iterable[ChangeLogEntry]) -> list[ChangeLogEntry]:
    """Most recent first. `sorted` is stable with reverse=True, so entries
    sharing an instant keep their input order."""
    return sorted(entries, key=lambda e: e.sort_instant, reverse=True)


def merge_change_logs(
    *sources: SourceLike,
    factory: Optional[ChangeLogNormalizerFactory] = None,
) -> list[ChangeLogEntry]:
    """Normalize every source, concatenate in argument order, then sort.

    Missing or unparseable timestamps sort as the epoch (oldest) and are kept.
    """

    factory = factory or ChangeLogNormalizerFactory()
    combined: list[ChangeLogEntry] = []
    for src in sources:
        if isinstance(src, ChangeLogSource):
            combined.extend(normalize_records(src.records, source=src.name, factory=factory))
        else:
            combined.extend(normalize_records(src, factory=factory))
    return sort_entries(combined)
