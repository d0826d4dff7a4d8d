from __future__ import annotations

from typing import Any, Mapping


def resolve_name(record: Mapping[str, Any]) -> tuple[str, str]:
    """Resolve `(first_name, last_name)` from a loosely-typed user record.

    Precedence:
    1. `first_name` / `last_name` fields win, each on its own.
    2. Otherwise the combined `name` field is split on the first space:
       the first part is the first name, the remainder the last name.
    3. Otherwise empty strings.
    """

    name = str(record.get("name") or "").strip()
    head, _, tail = name.partition(" ")

    first = record.get("first_name")
    last = record.get("last_name")

    first_name = str(first).strip() if first is not None else head
    last_name = str(last).strip() if last is not None else tail.strip()
    return first_name, last_name


def display_name(record: Mapping[str, Any]) -> str:
    first_name, last_name = resolve_name(record)
    full = f"{first_name} {last_name}".strip()
    return full or str(record.get("email") or "")
