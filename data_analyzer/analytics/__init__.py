"""In-memory validation, query and aggregation over record collections."""
from .errors import (
    AnalyticsError,
    ReadError,
    ValidationError,
    UnsupportedShapeError,
    InvalidFieldError,
    UnsupportedOperationError,
)
from .models import (
    AnalysisResult,
    AnalysisSummary,
    AnalyzerConfig,
    ColumnProfile,
    DatasetProfile,
    ReportConfig,
)
from .aggregator import reduce_values
from .analyzer import DataAnalyzer, create_analyzer
from .profiler import profile_records
from .validator import (
    find_invalid_records,
    is_dataset,
    is_number,
    is_sale,
    is_shape,
    is_string,
    is_user,
    is_valid_date,
    is_valid_email,
)

__all__ = [
    "AnalyticsError",
    "ReadError",
    "ValidationError",
    "UnsupportedShapeError",
    "InvalidFieldError",
    "UnsupportedOperationError",
    "AnalysisResult",
    "AnalysisSummary",
    "AnalyzerConfig",
    "ColumnProfile",
    "DatasetProfile",
    "ReportConfig",
    "reduce_values",
    "DataAnalyzer",
    "create_analyzer",
    "profile_records",
    "find_invalid_records",
    "is_dataset",
    "is_number",
    "is_sale",
    "is_shape",
    "is_string",
    "is_user",
    "is_valid_date",
    "is_valid_email",
]
