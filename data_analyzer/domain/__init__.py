"""Domain layer for data-analyzer."""
from .types import (
    AggregateOperation,
    AggregateResult,
    CompareFunction,
    Dataset,
    FileType,
    FilterFunction,
    LogicalType,
    Record,
    ReportFormat,
    SortOrder,
)
from .records import FieldSpec, RecordShape, Sale, User, SALE_SHAPE, USER_SHAPE, get_shape, register_shape

__all__ = ["AggregateOperation", "AggregateResult", "CompareFunction", "Dataset",
           "FileType", "FilterFunction", "LogicalType", "Record", "ReportFormat", "SortOrder",
           "FieldSpec", "RecordShape", "Sale", "User", "SALE_SHAPE", "USER_SHAPE", "get_shape", "register_shape"]
