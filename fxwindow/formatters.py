"""Output formatters for text, table, JSON, and CSV."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from fxwindow.aggregate import mean
from fxwindow.models import CollectionResult, CurrencyStat


def _sorted_stats(result: CollectionResult) -> list[CurrencyStat]:
    return [result.stats[code] for code in sorted(result.stats)]


def _point(stat: CurrencyStat) -> tuple[float, str, float, str]:
    assert stat.max is not None and stat.min is not None
    return stat.max.value, stat.max.date, stat.min.value, stat.min.date


def format_lines(result: CollectionResult) -> str:
    """One plain-text line per currency."""
    lines = []
    for stat in _sorted_stats(result):
        max_val, max_date, min_val, min_date = _point(stat)
        lines.append(
            f"Currency: {stat.name}, max rate: {max_val:.2f} ({max_date}), "
            f"min rate: {min_val:.2f} ({min_date}), "
            f"average rate: {mean(stat):.2f}"
        )
    return "".join(f"{line}\n" for line in lines)


def format_table(result: CollectionResult) -> str:
    """Format results as a Rich table rendered to string."""
    buf = io.StringIO()
    rich_console = Console(file=buf, width=120, no_color=True)

    header = (
        f"CBR Reference Rates Window\n"
        f"==========================\n"
        f"Window: {result.days_requested} days ending {result.end_date}\n"
        f"Days collected: {result.days_collected}\n"
    )

    table = Table(box=box.SIMPLE_HEAD, pad_edge=False)
    table.add_column("Code", style="bold")
    table.add_column("Name")
    table.add_column("Max", justify="right")
    table.add_column("Max Date", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Min Date", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("Days", justify="right")

    for stat in _sorted_stats(result):
        max_val, max_date, min_val, min_date = _point(stat)
        table.add_row(
            stat.code,
            stat.name,
            f"{max_val:.2f}",
            max_date,
            f"{min_val:.2f}",
            min_date,
            f"{mean(stat):.2f}",
            str(stat.count),
        )

    rich_console.print(header, end="")
    rich_console.print(table)

    footer = "\nData source: Bank of Russia daily rates (XML_daily_eng.asp)"
    if result.errors:
        footer += "\n\nErrors:"
        for e in result.errors:
            footer += f"\n  ⚠ {e}"
    rich_console.print(footer)

    return buf.getvalue()


def format_json(result: CollectionResult) -> str:
    """Format results as JSON."""
    data: dict[str, Any] = {
        "window": {
            "end_date": result.end_date.isoformat(),
            "days_requested": result.days_requested,
            "days_collected": result.days_collected,
            "aborted": result.aborted,
        },
        "currencies": [],
    }

    for stat in _sorted_stats(result):
        max_val, max_date, min_val, min_date = _point(stat)
        data["currencies"].append(
            {
                "code": stat.code,
                "name": stat.name,
                "valute_id": stat.valute_id,
                "nominal": stat.nominal,
                "max": {"value": round(max_val, 4), "date": max_date},
                "min": {"value": round(min_val, 4), "date": min_date},
                "mean": round(mean(stat), 4),
                "count": stat.count,
            }
        )

    if result.errors:
        data["errors"] = result.errors

    return json.dumps(data, indent=2, ensure_ascii=False)


def format_csv(result: CollectionResult) -> str:
    """Format results as CSV."""
    buf = io.StringIO()
    fields = [
        "code",
        "name",
        "nominal",
        "max",
        "max_date",
        "min",
        "min_date",
        "mean",
        "count",
    ]
    writer = csv.DictWriter(buf, fieldnames=fields)
    writer.writeheader()

    for stat in _sorted_stats(result):
        max_val, max_date, min_val, min_date = _point(stat)
        writer.writerow(
            {
                "code": stat.code,
                "name": stat.name,
                "nominal": str(stat.nominal),
                "max": f"{max_val:.4f}",
                "max_date": max_date,
                "min": f"{min_val:.4f}",
                "min_date": min_date,
                "mean": f"{mean(stat):.4f}",
                "count": str(stat.count),
            }
        )

    return buf.getvalue()
