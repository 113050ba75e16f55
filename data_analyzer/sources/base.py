"""
Record sources: bind a file to a record shape and load validated records.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..analytics.errors import AnalyticsError, ValidationError
from ..analytics.validator import find_invalid_records, is_dataset
from ..domain.records import RecordShape
from ..domain.types import Dataset, FileType

logger = logging.getLogger(__name__)


def detect_file_type(path: str) -> FileType:
    """Determine file type from the path's extension."""
    ext = Path(path).suffix.lower()
    if ext == ".csv":
        return FileType.CSV
    elif ext == ".json":
        return FileType.JSON
    elif ext == ".xml":
        return FileType.XML
    return FileType.UNKNOWN


@dataclass(frozen=True)
class FileInfo:
    path: str
    type: FileType


class DataSource(ABC):
    """A file bound to the record shape its contents must satisfy.

    Subclasses implement ``read`` for their format. Callers go through
    ``load_source`` (or ``load``), which never hands out unvalidated data.
    """

    def __init__(self, path: str | Path, shape: RecordShape) -> None:
        self.path = str(path)
        self.shape = shape
        self.file_type = detect_file_type(self.path)

    @abstractmethod
    def read(self) -> list[Any]:
        """Return the raw records; raise ReadError on I/O or parse failure."""

    def validate(self, data: Any) -> bool:
        return is_dataset(data, self.shape)

    def get_file_info(self) -> FileInfo:
        return FileInfo(path=self.path, type=self.file_type)

    def load(self) -> Dataset:
        return load_source(self)


def load_source(source: DataSource) -> Dataset:
    """Read then validate ``source``; the only way records leave a source."""
    logger.info("Reading %s records from %s", source.shape.name, source.path)
    try:
        data = source.read()
        if not source.validate(data):
            record_count = len(data) if isinstance(data, (list, tuple)) else 0
            raise ValidationError(
                source.shape.name,
                record_count,
                find_invalid_records(data, source.shape),
            )
    except AnalyticsError as exc:
        logger.error("Loading %s failed: %s", source.path, exc)
        raise

    logger.info("Loaded %d %s record(s) from %s", len(data), source.shape.name, source.path)
    return list(data)


def parse_cell(text: Any, logical_type: str) -> Any:
    """Convert one text cell to the runtime type ``logical_type`` expects.

    Cells that do not convert are returned as stripped text so that shape
    validation rejects them rather than a guessed value slipping through.
    """
    if not isinstance(text, str):
        return text
    value = text.strip()
    if logical_type == "number":
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return value
    if logical_type == "boolean":
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return value
