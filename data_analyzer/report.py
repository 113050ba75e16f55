"""
Render an AnalysisResult as a console report or as JSON.
"""
from __future__ import annotations

import json
from typing import Any, Sequence

from tabulate import tabulate

from .analytics.models import AnalysisResult, ReportConfig
from .config import get_settings

RULE_WIDTH = 60


def format_number(value: float) -> str:
    """Whole numbers with thousands separators, everything else to 2 decimals."""
    if isinstance(value, int) or float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:.2f}"


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


class Report:
    """Read-only view over one analysis result."""

    def __init__(self, result: AnalysisResult, config: ReportConfig | dict[str, Any] | None = None) -> None:
        self._result = result
        if isinstance(config, ReportConfig):
            self._config = config.model_copy()
        else:
            self._config = ReportConfig(**(config or {}))

    @property
    def config(self) -> ReportConfig:
        return self._config

    def set_title(self, title: str) -> "Report":
        self._config.title = title
        return self

    def show_summary(self, show: bool) -> "Report":
        self._config.show_summary = show
        return self

    def show_details(self, show: bool) -> "Report":
        self._config.show_details = show
        return self

    def generate(self) -> str:
        result = self._result
        lines: list[str] = ["=" * RULE_WIDTH, self._config.title.upper(), "=" * RULE_WIDTH, ""]

        if self._config.show_summary:
            lines.append("Summary:")
            lines.append(f"   Total records: {result.summary.total}")
            lines.append(f"   Analyzed at: {result.summary.timestamp:%Y-%m-%d %H:%M:%S}")
            lines.append("")

        if result.aggregates:
            lines.append("Statistics:")
            for key, value in result.aggregates.items():
                lines.append(f"   {key}: {format_number(value)}")
            lines.append("")

        if self._config.show_details and result.data:
            lines.append("Details:")
            if self._config.format == "json":
                lines.append(json.dumps(result.data, indent=2, ensure_ascii=False, default=str))
            else:
                lines.append(self._generate_table(result.data))
            lines.append("")

        lines.append("=" * RULE_WIDTH)
        return "\n".join(lines)

    def _generate_table(self, data: Sequence[dict[str, Any]]) -> str:
        if not data:
            return "   No data"
        max_rows = get_settings().report_max_rows
        headers = list(data[0].keys())
        rows = [[format_value(row.get(h)) for h in headers] for row in data[:max_rows]]
        table = tabulate(rows, headers=headers, tablefmt="github")
        lines = [f"   {line}" for line in table.splitlines()]
        if len(data) > max_rows:
            lines.append(f"   ... and {len(data) - max_rows} more record(s)")
        return "\n".join(lines)

    def to_json(self) -> str:
        return json.dumps(
            {
                "title": self._config.title,
                "summary": self._result.summary.model_dump(mode="json"),
                "aggregates": self._result.aggregates,
                "data": self._result.data,
            },
            indent=2,
            ensure_ascii=False,
            default=str,
        )

    def print(self) -> None:
        print(self.generate())
