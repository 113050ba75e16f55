"""Compute dataset profiles for a loaded record collection."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import pandas as pd

from ..domain.records import RecordShape
from .models import ColumnProfile, DatasetProfile

logger = logging.getLogger(__name__)


def profile_records(
    records: Sequence[Mapping[str, Any]],
    shape: RecordShape,
) -> DatasetProfile:
    """Build a DatasetProfile from records and the shape they were validated against.

    Min/max are reported for numeric fields only; bool values never count
    as numeric even though pandas would coerce them.
    """
    df = pd.DataFrame.from_records(list(records), columns=shape.field_names)
    row_count = len(df)
    columns: dict[str, ColumnProfile] = {}

    for spec in shape.fields:
        series = df[spec.name]
        null_count = int(series.isna().sum())
        null_ratio = null_count / row_count if row_count else 0.0
        non_null = series.dropna()
        distinct_count = int(non_null.nunique())

        min_value: Any = None
        max_value: Any = None

        if spec.logical_type == "number" and not non_null.empty:
            numeric = pd.to_numeric(
                non_null[non_null.map(lambda v: not isinstance(v, bool))],
                errors="coerce",
            ).dropna()
            if not numeric.empty:
                min_value = _to_json_safe(numeric.min())
                max_value = _to_json_safe(numeric.max())

        columns[spec.name] = ColumnProfile(
            logical_type=spec.logical_type,
            null_ratio=round(null_ratio, 6),
            distinct_count=distinct_count,
            min_value=min_value,
            max_value=max_value,
        )

    logger.debug("Profiled %d %s record(s)", row_count, shape.name)
    return DatasetProfile(shape=shape.name, row_count=row_count, columns=columns)


def _to_json_safe(val: Any) -> int | float | None:
    if val is None:
        return None
    f = float(val)
    return int(f) if f == int(f) else f
