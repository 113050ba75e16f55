from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import os

from dotenv import load_dotenv

load_dotenv()


def _getenv_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _getenv_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _normalize_level(raw: str | None) -> str:
    value = (raw or "INFO").strip().upper()
    return value if value in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO"


@dataclass(frozen=True)
class Settings:
    log_level: str
    sort_locale: str
    report_max_rows: int
    csv_delimiter: str
    high_value_threshold: float
    top_n: int


settings = Settings(
    log_level=_normalize_level(os.getenv("ANALYZER_LOG_LEVEL")),
    sort_locale=os.getenv("ANALYZER_SORT_LOCALE", ""),
    report_max_rows=_getenv_int("ANALYZER_REPORT_MAX_ROWS", 10),
    csv_delimiter=os.getenv("ANALYZER_CSV_DELIMITER", ","),
    high_value_threshold=_getenv_float("ANALYZER_HIGH_VALUE_THRESHOLD", 500.0),
    top_n=_getenv_int("ANALYZER_TOP_N", 5),
)

_RUNTIME_OVERRIDES: dict[str, Any] = {}


def get_settings() -> Settings:
    if not _RUNTIME_OVERRIDES:
        return settings
    base = settings
    return Settings(
        log_level=_RUNTIME_OVERRIDES.get("log_level", base.log_level),
        sort_locale=_RUNTIME_OVERRIDES.get("sort_locale", base.sort_locale),
        report_max_rows=_RUNTIME_OVERRIDES.get("report_max_rows", base.report_max_rows),
        csv_delimiter=_RUNTIME_OVERRIDES.get("csv_delimiter", base.csv_delimiter),
        high_value_threshold=_RUNTIME_OVERRIDES.get(
            "high_value_threshold", base.high_value_threshold
        ),
        top_n=_RUNTIME_OVERRIDES.get("top_n", base.top_n),
    )


def update_settings(overrides: dict[str, Any]) -> Settings:
    normalized: dict[str, Any] = {}
    for key, value in overrides.items():
        if value is None:
            continue
        if key == "log_level":
            normalized[key] = _normalize_level(str(value))
        elif key in {"report_max_rows", "top_n"}:
            normalized[key] = int(value)
        elif key == "high_value_threshold":
            normalized[key] = float(value)
        else:
            normalized[key] = value
    _RUNTIME_OVERRIDES.update(normalized)
    return get_settings()


def reset_settings() -> Settings:
    _RUNTIME_OVERRIDES.clear()
    return settings
