from __future__ import annotations


class AnalyticsError(Exception):
    """Base error class for loading and analyzing record collections."""


class ReadError(AnalyticsError):
    """Raised when a source cannot be read or its bytes are malformed for its format."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read '{path}': {reason}")
        self.path = path
        self.reason = reason


class ValidationError(AnalyticsError):
    """Raised when well-formed input does not satisfy the declared record shape."""

    def __init__(self, shape: str, record_count: int, invalid_indices: list[int] | None = None) -> None:
        invalid = invalid_indices or []
        message = f"Data does not match shape '{shape}' ({record_count} record(s) attempted"
        if invalid:
            preview = ", ".join(str(i) for i in invalid[:5])
            more = "" if len(invalid) <= 5 else f", ... {len(invalid) - 5} more"
            message += f"; invalid at index {preview}{more}"
        super().__init__(message + ")")
        self.shape = shape
        self.record_count = record_count
        self.invalid_indices = invalid


class UnsupportedShapeError(AnalyticsError):
    """Raised when a file extension maps to no known reader."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unsupported file type for '{path}' (supported: .csv, .json, .xml)")
        self.path = path


class InvalidFieldError(AnalyticsError):
    """Raised when a field reference is unknown, or wrongly typed for the operation."""

    def __init__(self, field: str, shape: str, reason: str = "not a field of the shape") -> None:
        super().__init__(f"Field '{field}' on shape '{shape}': {reason}")
        self.field = field
        self.shape = shape


class UnsupportedOperationError(AnalyticsError):
    """Raised when an aggregate operation name is not one of sum/avg/min/max/count."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Unsupported aggregate operation: {operation}")
        self.operation = operation
