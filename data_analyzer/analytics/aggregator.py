"""Numeric reductions over a column of record values.

Every reduction returns 0 for an empty input; callers that need to tell
"no data" from "zero" inspect the record count instead.
"""
from __future__ import annotations

from typing import Any, Iterable

from .errors import UnsupportedOperationError
from .validator import is_number

Number = int | float


def numeric_values(values: Iterable[Any]) -> list[Number]:
    """Keep only real numbers; text, bools, None and NaN are dropped."""
    return [v for v in values if is_number(v)]


def total(values: list[Number]) -> Number:
    return sum(values, 0)


def average(values: list[Number]) -> Number:
    if not values:
        return 0
    return total(values) / len(values)


def minimum(values: list[Number]) -> Number:
    return min(values) if values else 0


def maximum(values: list[Number]) -> Number:
    return max(values) if values else 0


def count(values: list[Number]) -> int:
    return len(values)


_REDUCERS = {
    "sum": total,
    "avg": average,
    "min": minimum,
    "max": maximum,
    "count": count,
}


def reduce_values(values: Iterable[Any], operation: str) -> Number:
    """Apply ``operation`` to the numeric members of ``values``."""
    reducer = _REDUCERS.get(operation)
    if reducer is None:
        raise UnsupportedOperationError(operation)
    return reducer(numeric_values(values))
