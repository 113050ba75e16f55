"""Shared fixtures: small Sale/User collections and files holding them."""
from __future__ import annotations

import json
from pathlib import Path

import pytest


SALES_CSV = """id,product,category,price,quantity,date
1,Laptop,Electronics,1200,2,2024-01-05
2,Desk Chair,Furniture,150,4,2024-01-06
3,Headphones,Electronics,80,10,2024-01-07
"""

SALES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<sales>
  <sale>
    <id>1</id><product>Laptop</product><category>Electronics</category>
    <price>1200</price><quantity>2</quantity><date>2024-01-05</date>
  </sale>
  <sale>
    <id>2</id><product>Desk Chair</product><category>Furniture</category>
    <price>150.5</price><quantity>4</quantity><date>2024-01-06</date>
  </sale>
</sales>
"""


@pytest.fixture
def sales() -> list[dict]:
    return [
        {"id": 1, "product": "Laptop", "category": "Electronics", "price": 1200, "quantity": 2, "date": "2024-01-05"},
        {"id": 2, "product": "Desk Chair", "category": "Furniture", "price": 150, "quantity": 4, "date": "2024-01-06"},
        {"id": 3, "product": "Headphones", "category": "Electronics", "price": 80, "quantity": 10, "date": "2024-01-07"},
        {"id": 4, "product": "Monitor", "category": "Electronics", "price": 300, "quantity": 3, "date": "2024-01-08"},
        {"id": 5, "product": "Bookshelf", "category": "Furniture", "price": 150, "quantity": 1, "date": "2024-01-09"},
    ]


@pytest.fixture
def users() -> list[dict]:
    return [
        {"id": 1, "name": "Ada", "age": 36, "email": "ada@example.com", "role": "developer", "active": True},
        {"id": 2, "name": "Grace", "age": 45, "email": "grace@example.com", "role": "admin", "active": False},
        {"id": 3, "name": "Linus", "age": 28, "email": "linus@example.com", "role": "developer", "active": True},
    ]


@pytest.fixture
def sales_csv(tmp_path: Path) -> Path:
    path = tmp_path / "sales.csv"
    path.write_text(SALES_CSV, encoding="utf-8")
    return path


@pytest.fixture
def sales_xml(tmp_path: Path) -> Path:
    path = tmp_path / "sales.xml"
    path.write_text(SALES_XML, encoding="utf-8")
    return path


@pytest.fixture
def users_json(tmp_path: Path, users) -> Path:
    path = tmp_path / "users.json"
    path.write_text(json.dumps(users), encoding="utf-8")
    return path
