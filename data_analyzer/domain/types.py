"""
Core type definitions and constants.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Literal


class FileType(str, Enum):
    CSV = "csv"
    JSON = "json"
    XML = "xml"
    UNKNOWN = "unknown"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


AggregateOperation = Literal["sum", "avg", "min", "max", "count"]

LogicalType = Literal["number", "string", "boolean", "date"]
NUMERIC_TYPES: set[str] = {"number"}

ReportFormat = Literal["table", "json"]

Record = dict[str, Any]
Dataset = list[Record]
FilterFunction = Callable[[Record], bool]
CompareFunction = Callable[[Record, Record], int]
AggregateResult = dict[str, int | float]
