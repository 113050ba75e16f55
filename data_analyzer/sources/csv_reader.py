"""CSV sources: header line skipped, columns mapped positionally onto the shape."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from ..analytics.errors import ReadError
from ..config import get_settings
from ..domain.records import SALE_SHAPE, RecordShape
from .base import DataSource, parse_cell


_OVERFLOW = "__overflow__"


def read_csv_raw(path: str, shape: RecordShape, delimiter: str = ",") -> list[dict[str, Any]]:
    """Read ``path`` into dicts keyed by the shape's field order.

    Short rows leave trailing fields absent; rows wider than the shape are
    a read error.
    """
    field_names = shape.field_names
    try:
        df = pd.read_csv(
            path,
            sep=delimiter,
            header=None,
            skiprows=1,
            names=[*field_names, _OVERFLOW],
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        raise ReadError(path, str(exc)) from exc

    if df[_OVERFLOW].notna().any():
        raise ReadError(path, f"expected at most {len(field_names)} columns")
    df = df.drop(columns=_OVERFLOW)

    records: list[dict[str, Any]] = []
    for row in df.to_dict(orient="records"):
        records.append({
            name: parse_cell(value, shape.field_type(name) or "string")
            for name, value in row.items()
            if not pd.isna(value)
        })
    return records


class CsvReader(DataSource):
    """Sale records from a comma (or ``delimiter``) separated file."""

    def __init__(
        self,
        path: str | Path,
        shape: RecordShape = SALE_SHAPE,
        delimiter: str | None = None,
    ) -> None:
        super().__init__(path, shape)
        self.delimiter = delimiter or get_settings().csv_delimiter

    def read(self) -> list[dict[str, Any]]:
        return read_csv_raw(self.path, self.shape, self.delimiter)
