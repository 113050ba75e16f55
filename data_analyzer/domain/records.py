"""
Record shapes: the named schemas a record must satisfy.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TypedDict

from .types import LogicalType, NUMERIC_TYPES


class Sale(TypedDict):
    id: int
    product: str
    category: str
    price: float
    quantity: int
    date: str


class User(TypedDict):
    id: int
    name: str
    age: int
    email: str
    role: str
    active: bool


@dataclass(frozen=True)
class FieldSpec:
    """A required field and the logical type its value must have."""
    name: str
    logical_type: LogicalType


@dataclass(frozen=True)
class RecordShape:
    """Named, ordered field descriptor used for validation and field checks.

    Field order matters for positional formats (CSV columns map onto
    ``fields`` in declaration order).
    """
    name: str
    fields: tuple[FieldSpec, ...]

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def has_field(self, name: str) -> bool:
        return any(f.name == name for f in self.fields)

    def field_type(self, name: str) -> LogicalType | None:
        for spec in self.fields:
            if spec.name == name:
                return spec.logical_type
        return None

    def is_numeric_field(self, name: str) -> bool:
        return self.field_type(name) in NUMERIC_TYPES

    @classmethod
    def infer(cls, name: str, sample: Mapping[str, Any]) -> "RecordShape":
        """Build a shape from one record's keys and runtime value types."""
        return cls(name, tuple(FieldSpec(k, _infer_logical_type(v)) for k, v in sample.items()))


def _infer_logical_type(value: Any) -> LogicalType:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return "string"


SALE_SHAPE = RecordShape(
    "Sale",
    (
        FieldSpec("id", "number"),
        FieldSpec("product", "string"),
        FieldSpec("category", "string"),
        FieldSpec("price", "number"),
        FieldSpec("quantity", "number"),
        FieldSpec("date", "date"),
    ),
)

USER_SHAPE = RecordShape(
    "User",
    (
        FieldSpec("id", "number"),
        FieldSpec("name", "string"),
        FieldSpec("age", "number"),
        FieldSpec("email", "string"),
        FieldSpec("role", "string"),
        FieldSpec("active", "boolean"),
    ),
)

_SHAPES: dict[str, RecordShape] = {
    SALE_SHAPE.name.lower(): SALE_SHAPE,
    USER_SHAPE.name.lower(): USER_SHAPE,
}


def register_shape(shape: RecordShape) -> None:
    _SHAPES[shape.name.lower()] = shape


def get_shape(name: str) -> RecordShape | None:
    return _SHAPES.get(name.strip().lower())
