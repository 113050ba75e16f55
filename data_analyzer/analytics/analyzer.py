"""Chainable in-memory query pipeline over a validated record collection."""
from __future__ import annotations

import json
import locale
import logging
from datetime import datetime
from functools import cmp_to_key
from typing import Any, Iterable, Mapping

from ..domain.records import RecordShape
from ..domain.types import (
    AggregateOperation,
    AggregateResult,
    CompareFunction,
    Dataset,
    FilterFunction,
    Record,
    SortOrder,
)
from .aggregator import Number, reduce_values
from .errors import InvalidFieldError
from .models import AnalysisResult, AnalysisSummary, AnalyzerConfig
from .validator import is_number

logger = logging.getLogger(__name__)


def _copy_dataset(data: Iterable[Mapping[str, Any]]) -> Dataset:
    return [dict(record) for record in data]


def _compare_values(a: Any, b: Any) -> int:
    """Numbers compare numerically, text by the active collation locale;
    any other pairing compares equal."""
    if is_number(a) and is_number(b):
        return (a > b) - (a < b)
    if isinstance(a, str) and isinstance(b, str):
        return locale.strcoll(a, b)
    return 0


def _structural_key(record: Record) -> str:
    # whole floats collapse onto ints so 10 and 10.0 share a key
    normalized = {
        name: int(value) if isinstance(value, float) and value.is_integer() else value
        for name, value in record.items()
    }
    return json.dumps(normalized, sort_keys=True, default=str)


def _strict_equals(a: Any, b: Any) -> bool:
    """Equality without cross-type matches: ``True`` never equals ``1``, though
    int and float are both numbers."""
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and a == b


class DataAnalyzer:
    """Holds a working copy of a dataset and applies eager, in-place steps.

    Every transformation returns the analyzer so calls chain left to right;
    ``analyze`` is terminal and snapshots the working set. Field references
    are checked against the record shape, either the one given or one
    inferred from the first record.
    """

    def __init__(self, data: Iterable[Mapping[str, Any]], shape: RecordShape | None = None) -> None:
        self._explicit_shape = shape
        self._data: Dataset = _copy_dataset(data)
        self._shape = shape or self._infer_shape()

    @property
    def shape(self) -> RecordShape | None:
        return self._shape

    def __len__(self) -> int:
        return len(self._data)

    def _infer_shape(self) -> RecordShape | None:
        if not self._data:
            return None
        return RecordShape.infer("Record", self._data[0])

    def _check_field(self, field: str) -> None:
        if self._shape is not None and not self._shape.has_field(field):
            raise InvalidFieldError(field, self._shape.name)

    # -- filtering -----------------------------------------------------------

    def filter(self, predicate: FilterFunction) -> "DataAnalyzer":
        self._data = [record for record in self._data if predicate(record)]
        return self

    def filter_by(self, field: str, value: Any) -> "DataAnalyzer":
        self._check_field(field)
        self._data = [record for record in self._data if _strict_equals(record.get(field), value)]
        return self

    def filter_by_range(self, field: str, min_value: Number, max_value: Number) -> "DataAnalyzer":
        """Keep records whose numeric ``field`` lies in ``[min_value, max_value]``."""
        self._check_field(field)
        if self._shape is not None and not self._shape.is_numeric_field(field):
            raise InvalidFieldError(field, self._shape.name, "range filter requires a numeric field")
        self._data = [
            record for record in self._data
            if is_number(record.get(field)) and min_value <= record[field] <= max_value
        ]
        return self

    # -- ordering ------------------------------------------------------------

    def sort(self, compare: CompareFunction) -> "DataAnalyzer":
        self._data.sort(key=cmp_to_key(compare))
        return self

    def sort_by(self, field: str, order: SortOrder = SortOrder.ASC) -> "DataAnalyzer":
        self._check_field(field)
        sign = -1 if SortOrder(order) == SortOrder.DESC else 1
        self._data.sort(
            key=cmp_to_key(lambda a, b: sign * _compare_values(a.get(field), b.get(field)))
        )
        return self

    # -- grouping ------------------------------------------------------------

    def group_by(self, field: str) -> dict[str, Dataset]:
        """Partition the working set by ``str(record[field])`` without changing it."""
        self._check_field(field)
        groups: dict[str, Dataset] = {}
        for record in self._data:
            groups.setdefault(str(record.get(field)), []).append(dict(record))
        return groups

    # -- slicing -------------------------------------------------------------

    def limit(self, count: int) -> "DataAnalyzer":
        self._data = self._data[:max(count, 0)]
        return self

    def skip(self, count: int) -> "DataAnalyzer":
        self._data = self._data[max(count, 0):]
        return self

    def distinct(self) -> "DataAnalyzer":
        seen: set[str] = set()
        unique: Dataset = []
        for record in self._data:
            key = _structural_key(record)
            if key in seen:
                continue
            seen.add(key)
            unique.append(record)
        self._data = unique
        return self

    # -- aggregation ---------------------------------------------------------

    def aggregate(self, field: str, operation: AggregateOperation) -> Number:
        self._check_field(field)
        return reduce_values((record.get(field) for record in self._data), operation)

    def multi_aggregate(self, config: Mapping[str, AggregateOperation]) -> AggregateResult:
        result: AggregateResult = {}
        for field, operation in config.items():
            if operation:
                result[f"{field}_{operation}"] = self.aggregate(field, operation)
        return result

    def apply(self, config: AnalyzerConfig) -> "DataAnalyzer":
        """Apply the sort and limit parts of ``config``; grouping is served by ``group_by``."""
        if config.sort_by:
            self.sort_by(config.sort_by, config.sort_order)
        if config.limit is not None:
            self.limit(config.limit)
        return self

    # -- results -------------------------------------------------------------

    def get_results(self) -> Dataset:
        return _copy_dataset(self._data)

    def analyze(self, aggregate_config: Mapping[str, AggregateOperation] | None = None) -> AnalysisResult:
        aggregates = self.multi_aggregate(aggregate_config) if aggregate_config is not None else None
        logger.debug("Analyzed %d record(s); aggregates=%s", len(self._data), aggregates)
        return AnalysisResult(
            data=tuple(self.get_results()),
            summary=AnalysisSummary(total=len(self._data), timestamp=datetime.now()),
            aggregates=aggregates,
        )

    def reset(self, new_data: Iterable[Mapping[str, Any]]) -> "DataAnalyzer":
        self._data = _copy_dataset(new_data)
        if self._explicit_shape is None:
            self._shape = self._infer_shape()
        return self


def create_analyzer(data: Iterable[Mapping[str, Any]], shape: RecordShape | None = None) -> DataAnalyzer:
    return DataAnalyzer(data, shape)
