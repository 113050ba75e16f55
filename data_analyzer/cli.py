"""
Command line entry point: load a sales (CSV/XML) or users (JSON) file and
print the standard analyses for it.
"""
from __future__ import annotations

import locale
import logging
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .analytics import AnalyticsError, create_analyzer, profile_records
from .analytics.errors import UnsupportedShapeError
from .analytics.helpers import percentage
from .config import get_settings
from .domain.records import SALE_SHAPE, USER_SHAPE
from .domain.types import Dataset, FileType, SortOrder
from .report import Report, format_number
from .sources import create_source, detect_file_type, load_source

logger = logging.getLogger(__name__)

ELECTRONICS = "Electronics"
USAGE = """Usage:
   data-analyzer <file>

Examples:
   data-analyzer data/sales.csv
   data-analyzer data/sales.xml
   data-analyzer data/users.json
"""

app = typer.Typer(add_completion=False, help="Analyze sales (CSV/XML) and user (JSON) data files.")


def _configure() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        locale.setlocale(locale.LC_COLLATE, settings.sort_locale)
    except locale.Error as exc:
        logger.warning("Sort locale %r unavailable, keeping default collation: %s", settings.sort_locale, exc)


def _emit(report: Report, output_format: str) -> None:
    typer.echo(report.to_json() if output_format == "json" else report.generate())


def _section(title: str) -> None:
    typer.echo("")
    typer.echo("-" * 40)
    typer.echo(title)
    typer.echo("-" * 40)


def analyze_sales(sales: Dataset, output_format: str = "table") -> None:
    settings = get_settings()
    analyzer = create_analyzer(sales, SALE_SHAPE)

    _section(f"{ELECTRONICS} sales")
    electronics = (
        analyzer.reset(sales)
        .filter_by("category", ELECTRONICS)
        .sort_by("price", SortOrder.DESC)
        .analyze({"price": "sum", "quantity": "sum"})
    )
    _emit(Report(electronics, {"title": f"{ELECTRONICS} Sales Report"}), output_format)

    threshold = settings.high_value_threshold
    _section(f"High-value products (price > {format_number(threshold)})")
    high_value = (
        analyzer.reset(sales)
        .filter(lambda sale: sale["price"] > threshold)
        .sort_by("price", SortOrder.DESC)
        .limit(settings.top_n)
        .analyze({"price": "avg", "quantity": "sum"})
    )
    _emit(Report(high_value, {"title": f"High-Value Top {settings.top_n}"}), output_format)

    _section("Revenue by category")
    groups = analyzer.reset(sales).group_by("category")
    grand_total = sum(s["price"] * s["quantity"] for s in sales)
    for category, items in groups.items():
        revenue = sum(item["price"] * item["quantity"] for item in items)
        typer.echo(
            f"   {category}: {len(items)} product(s), revenue {format_number(revenue)} "
            f"({percentage(revenue, grand_total):.1f}%)"
        )


def analyze_users(users: Dataset, output_format: str = "table") -> None:
    analyzer = create_analyzer(users, USER_SHAPE)

    _section("Active users")
    active = analyzer.filter_by("active", True).sort_by("age", SortOrder.ASC).analyze({"age": "avg"})
    _emit(Report(active, {"title": "Active Users Report"}), output_format)

    _section("Developers")
    developers = analyzer.reset(users).filter_by("role", "developer").analyze({"age": "avg"})
    _emit(Report(developers, {"title": "Developer Report"}), output_format)

    _section("Users by role")
    for role, members in analyzer.reset(users).group_by("role").items():
        avg_age = sum(u["age"] for u in members) / len(members)
        typer.echo(f"   {role}: {len(members)} user(s), average age {avg_age:.1f}")


@app.command()
def main(
    path: Optional[Path] = typer.Argument(None, help="Data file (.csv, .json or .xml)"),
    output_format: str = typer.Option("table", "--format", "-f", help="table or json"),
    profile: bool = typer.Option(False, "--profile", help="Print a per-field profile first"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Load PATH, validate it and print the standard analyses."""
    if version:
        typer.echo(__version__)
        raise typer.Exit()
    if path is None:
        typer.echo(USAGE)
        raise typer.Exit()
    if output_format not in ("table", "json"):
        typer.echo(f"Unknown format '{output_format}' (expected table or json)", err=True)
        raise typer.Exit(2)

    _configure()
    file_type = detect_file_type(str(path))

    try:
        source = create_source(path)
    except UnsupportedShapeError as exc:
        typer.echo(f"Error: {exc}", err=True)
        return

    try:
        records = load_source(source)
    except AnalyticsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Loaded {len(records)} {source.shape.name} record(s) from {path}")
    if profile:
        typer.echo(profile_records(records, source.shape).model_dump_json(indent=2))

    if file_type == FileType.JSON:
        analyze_users(records, output_format)
    else:
        analyze_sales(records, output_format)


if __name__ == "__main__":
    app()
