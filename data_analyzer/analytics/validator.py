"""Validate untyped values against named record shapes."""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from ..domain.records import SALE_SHAPE, USER_SHAPE, RecordShape

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_number(value: Any) -> bool:
    """True for int/float values other than bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def is_valid_date(text: str) -> bool:
    """True when ``text`` is ``YYYY-MM-DD`` and names a real calendar day."""
    if not _DATE_RE.match(text):
        return False
    try:
        date.fromisoformat(text)
    except ValueError:
        return False
    return True


def _matches_type(value: Any, logical_type: str) -> bool:
    if logical_type == "number":
        return is_number(value)
    if logical_type == "boolean":
        return isinstance(value, bool)
    # "string" and "date" both require text; date format is checked by is_valid_date
    return isinstance(value, str)


def is_shape(value: Any, shape: RecordShape) -> bool:
    """Return True when ``value`` is a mapping holding every field of ``shape``
    with exactly the declared runtime type. Never raises."""
    if not isinstance(value, Mapping):
        return False
    for spec in shape.fields:
        if spec.name not in value:
            return False
        if not _matches_type(value[spec.name], spec.logical_type):
            return False
    return True


def is_sale(value: Any) -> bool:
    return is_shape(value, SALE_SHAPE)


def is_user(value: Any) -> bool:
    return is_shape(value, USER_SHAPE)


def find_invalid_records(value: Any, shape: RecordShape) -> list[int]:
    """Indices of items in ``value`` that do not satisfy ``shape``."""
    if not isinstance(value, (list, tuple)):
        return []
    return [i for i, item in enumerate(value) if not is_shape(item, shape)]


def is_dataset(value: Any, shape: RecordShape) -> bool:
    """Collection-level check: a sequence whose items all satisfy ``shape``.

    An empty sequence conforms vacuously.
    """
    if not isinstance(value, (list, tuple)):
        return False
    return all(is_shape(item, shape) for item in value)
