"""Data models for daily rate records and per-currency window statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(slots=True, frozen=True)
class RateRecord:
    """One ``Valute`` entry of a daily document. Rate is quoted per ``nominal`` units."""

    num_code: int
    char_code: str
    nominal: int
    name: str
    value: float
    valute_id: str | None = None


@dataclass(slots=True)
class RatePoint:
    value: float
    date: str  # DD/MM/YYYY, as requested


@dataclass(slots=True)
class CurrencyStat:
    code: str
    name: str
    max: RatePoint | None = None
    min: RatePoint | None = None
    total_value: float = 0.0
    count: int = 0
    nominal: int = 1
    valute_id: str | None = None


AggregationStore = dict[str, CurrencyStat]


@dataclass(slots=True)
class CollectionResult:
    end_date: date
    days_requested: int
    days_collected: int = 0
    stats: AggregationStore = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    aborted: bool = False
