"""XML sources: ``<sales><sale>...</sale></sales>`` documents."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from ..analytics.errors import ReadError
from ..domain.records import SALE_SHAPE, RecordShape
from ..domain.types import FileType
from .base import DataSource, parse_cell

logger = logging.getLogger(__name__)


def read_xml_raw(
    path: str,
    shape: RecordShape,
    root_tag: str = "sales",
    item_tag: str = "sale",
) -> list[dict[str, Any]]:
    """Extract every ``root_tag/item_tag`` element as a flat dict.

    A single item and many items both come back as a list; a document
    with a different root, or no items, yields an empty list.
    """
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise ReadError(path, str(exc)) from exc

    if root.tag != root_tag:
        logger.warning("Expected <%s> root in %s, found <%s>", root_tag, path, root.tag)
        return []

    return [_element_to_record(item, shape) for item in root.findall(item_tag)]


def _element_to_record(item: ET.Element, shape: RecordShape) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for child in item:
        record[child.tag] = parse_cell(child.text or "", shape.field_type(child.tag) or "string")
    return record


class XmlReader(DataSource):
    """Sale records from an XML document."""

    def __init__(self, path: str | Path, shape: RecordShape = SALE_SHAPE) -> None:
        super().__init__(path, shape)
        self.file_type = FileType.XML

    def read(self) -> list[dict[str, Any]]:
        return read_xml_raw(self.path, self.shape)
