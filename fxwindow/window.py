"""Trailing window of calendar dates, formatted the way the CBR service expects."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

DEFAULT_WINDOW_DAYS = 90
DATE_FORMAT = "%d/%m/%Y"


def format_date(d: date) -> str:
    """Render a date as DD/MM/YYYY."""
    return d.strftime(DATE_FORMAT)


def iter_window(today: date, days: int = DEFAULT_WINDOW_DAYS) -> Iterator[date]:
    """Yield today, today-1, ... for ``days`` calendar days."""
    if days < 1:
        raise ValueError("days must be positive")
    for offset in range(days):
        yield today - timedelta(days=offset)


def date_window(today: date, days: int = DEFAULT_WINDOW_DAYS) -> list[str]:
    return [format_date(d) for d in iter_window(today, days)]
