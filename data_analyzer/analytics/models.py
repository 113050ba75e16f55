from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..domain.types import ReportFormat, SortOrder


class AnalysisSummary(BaseModel):
    """Record count and completion time of one ``analyze`` call."""
    model_config = ConfigDict(frozen=True)

    total: int
    timestamp: datetime


class AnalysisResult(BaseModel):
    """Immutable snapshot emitted by ``DataAnalyzer.analyze``.

    ``aggregates`` is keyed ``"<field>_<operation>"`` and is ``None`` when no
    aggregate configuration was given. ``data`` is a tuple so the record count
    cannot drift from ``summary.total``.
    """
    model_config = ConfigDict(frozen=True)

    data: tuple[dict[str, Any], ...]
    summary: AnalysisSummary
    aggregates: dict[str, int | float] | None = None


class AnalyzerConfig(BaseModel):
    """Declarative pipeline options applied by ``DataAnalyzer.apply``."""
    sort_by: str | None = None
    sort_order: SortOrder = SortOrder.ASC
    limit: int | None = Field(default=None, ge=0)
    group_by: str | None = None


class ReportConfig(BaseModel):
    """Display options for a Report.

    Explicit nulls fall back to the defaults so partially filled configs
    from callers never fail validation.
    """
    title: str = "Data Analysis Report"
    show_summary: bool = True
    show_details: bool = True
    format: ReportFormat = "table"

    @model_validator(mode="before")
    @classmethod
    def _coerce_nulls(cls, values: Any) -> Any:
        if isinstance(values, dict):
            return {k: v for k, v in values.items() if v is not None}
        return values


class ColumnProfile(BaseModel):
    """Per-field statistics."""
    logical_type: str
    null_ratio: float
    distinct_count: int
    min_value: float | int | None = None
    max_value: float | int | None = None


class DatasetProfile(BaseModel):
    """Aggregate statistics for a validated record collection."""
    shape: str
    row_count: int
    columns: dict[str, ColumnProfile] = Field(default_factory=dict)
