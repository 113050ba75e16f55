"""JSON sources: one parse to a native array of objects."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

from ..analytics.errors import ReadError
from ..domain.records import USER_SHAPE, RecordShape
from ..domain.types import Dataset
from .base import DataSource, load_source


def read_json_raw(path: str) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ReadError(path, str(exc)) from exc


class JsonReader(DataSource):
    """User records from a JSON array."""

    def __init__(self, path: str | Path, shape: RecordShape = USER_SHAPE) -> None:
        super().__init__(path, shape)

    def read(self) -> Any:
        return read_json_raw(self.path)

    def load_active(self) -> Dataset:
        return [user for user in load_source(self) if user.get("active") is True]

    def load_by_role(self, role: str) -> Dataset:
        return [user for user in load_source(self) if user.get("role") == role]


class GenericJsonReader(DataSource):
    """JSON array checked by a caller-supplied collection validator."""

    def __init__(
        self,
        path: str | Path,
        validator: Callable[[Any], bool],
        shape: RecordShape | None = None,
    ) -> None:
        super().__init__(path, shape or RecordShape("Record", ()))
        self._validator = validator

    def read(self) -> Any:
        return read_json_raw(self.path)

    def validate(self, data: Any) -> bool:
        return self._validator(data)
