"""Pick a reader for a path by its extension."""
from __future__ import annotations

from pathlib import Path

from ..analytics.errors import UnsupportedShapeError
from ..domain.types import FileType
from .base import DataSource, detect_file_type
from .csv_reader import CsvReader
from .json_reader import JsonReader
from .xml_reader import XmlReader

_READERS: dict[FileType, type[DataSource]] = {
    FileType.CSV: CsvReader,
    FileType.JSON: JsonReader,
    FileType.XML: XmlReader,
}


def create_source(path: str | Path) -> DataSource:
    """CSV and XML files hold Sale records, JSON files hold User records."""
    reader_cls = _READERS.get(detect_file_type(str(path)))
    if reader_cls is None:
        raise UnsupportedShapeError(str(path))
    return reader_cls(path)
