"""Tests for output formatters."""

from __future__ import annotations

import csv
import io
import json
from datetime import date

from fxwindow.formatters import format_csv, format_json, format_lines, format_table
from fxwindow.models import CollectionResult, CurrencyStat, RatePoint


def _make_result(errors: list[str] | None = None) -> CollectionResult:
    usd = CurrencyStat(
        code="USD",
        name="US Dollar",
        max=RatePoint(95.0, "02/03/2024"),
        min=RatePoint(90.0, "01/03/2024"),
        total_value=185.0,
        count=2,
    )
    eur = CurrencyStat(
        code="EUR",
        name="Euro",
        max=RatePoint(99.1234, "01/03/2024"),
        min=RatePoint(98.5, "02/03/2024"),
        total_value=197.6234,
        count=2,
    )
    return CollectionResult(
        end_date=date(2024, 3, 2),
        days_requested=2,
        days_collected=2,
        stats={"USD": usd, "EUR": eur},
        errors=errors or [],
    )


class TestFormatLines:
    def test_one_line_per_currency(self) -> None:
        output = format_lines(_make_result())
        assert len(output.splitlines()) == 2

    def test_line_fields(self) -> None:
        output = format_lines(_make_result())
        assert (
            "Currency: US Dollar, max rate: 95.00 (02/03/2024), "
            "min rate: 90.00 (01/03/2024), average rate: 92.50"
        ) in output

    def test_two_decimals(self) -> None:
        output = format_lines(_make_result())
        assert "max rate: 99.12 (01/03/2024)" in output
        assert "average rate: 98.81" in output

    def test_empty(self) -> None:
        result = CollectionResult(end_date=date(2024, 3, 2), days_requested=90)
        assert format_lines(result) == ""


class TestFormatTable:
    def test_contains_header(self) -> None:
        output = format_table(_make_result())
        assert "CBR Reference Rates Window" in output
        assert "2 days ending 2024-03-02" in output

    def test_contains_currencies(self) -> None:
        output = format_table(_make_result())
        assert "USD" in output
        assert "Euro" in output
        assert "92.50" in output

    def test_errors_shown(self) -> None:
        output = format_table(_make_result(errors=["03/03/2024: Request failed"]))
        assert "Request failed" in output

    def test_no_errors_section(self) -> None:
        output = format_table(_make_result())
        assert "Errors:" not in output


class TestFormatJson:
    def test_valid_json(self) -> None:
        data = json.loads(format_json(_make_result()))
        assert data["window"]["end_date"] == "2024-03-02"
        assert data["window"]["days_collected"] == 2

    def test_currencies_sorted(self) -> None:
        data = json.loads(format_json(_make_result()))
        assert [c["code"] for c in data["currencies"]] == ["EUR", "USD"]

    def test_values(self) -> None:
        data = json.loads(format_json(_make_result()))
        usd = data["currencies"][1]
        assert usd["max"] == {"value": 95.0, "date": "02/03/2024"}
        assert usd["min"] == {"value": 90.0, "date": "01/03/2024"}
        assert usd["mean"] == 92.5
        assert usd["count"] == 2
        assert usd["nominal"] == 1

    def test_errors_in_json(self) -> None:
        data = json.loads(format_json(_make_result(errors=["boom"])))
        assert data["errors"] == ["boom"]

    def test_no_errors_when_empty(self) -> None:
        data = json.loads(format_json(_make_result()))
        assert "errors" not in data


class TestFormatCsv:
    def test_header_row(self) -> None:
        lines = format_csv(_make_result()).strip().split("\n")
        assert lines[0].strip() == "code,name,nominal,max,max_date,min,min_date,mean,count"

    def test_data_rows(self) -> None:
        rows = list(csv.DictReader(io.StringIO(format_csv(_make_result()))))
        assert len(rows) == 2
        assert rows[1]["code"] == "USD"
        assert rows[1]["mean"] == "92.5000"
