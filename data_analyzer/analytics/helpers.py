"""Small record-collection helpers: keyed lookups, projections and percentages."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from ..domain.types import Dataset, Record


def unique_by(records: Iterable[Mapping[str, Any]], key: str) -> Dataset:
    """First record for each distinct value of ``key``, in input order."""
    seen: dict[Any, Record] = {}
    for record in records:
        seen.setdefault(record.get(key), dict(record))
    return list(seen.values())


def key_by(records: Iterable[Mapping[str, Any]], key: str) -> dict[str, Record]:
    """Index records by ``str(record[key])``; later records win."""
    return {str(record.get(key)): dict(record) for record in records}


def pick(record: Mapping[str, Any], keys: Iterable[str]) -> Record:
    return {k: record[k] for k in keys if k in record}


def omit(record: Mapping[str, Any], keys: Iterable[str]) -> Record:
    dropped = set(keys)
    return {k: v for k, v in record.items() if k not in dropped}


def percentage(value: float, total: float) -> float:
    if total == 0:
        return 0.0
    return value / total * 100
