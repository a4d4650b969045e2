"""Per-currency running statistics over the fetched days."""

from __future__ import annotations

from collections.abc import Iterable

from fxwindow.models import AggregationStore, CurrencyStat, RatePoint, RateRecord


def update(
    store: AggregationStore,
    records: Iterable[RateRecord],
    date_str: str,
) -> AggregationStore:
    """Fold one day's records into the store and return it.

    Extremes are only replaced by a strictly larger/smaller value, so on ties
    the first date processed wins.
    """
    for rec in records:
        stat = store.get(rec.char_code)
        if stat is None:
            stat = CurrencyStat(
                code=rec.char_code,
                name=rec.name,
                nominal=rec.nominal,
                valute_id=rec.valute_id,
            )
            store[rec.char_code] = stat

        if stat.max is None or rec.value > stat.max.value:
            stat.max = RatePoint(rec.value, date_str)
        if stat.min is None or rec.value < stat.min.value:
            stat.min = RatePoint(rec.value, date_str)

        stat.total_value += rec.value
        stat.count += 1
    return store


def mean(stat: CurrencyStat) -> float:
    """Arithmetic mean of the observed rates."""
    if stat.count == 0:
        raise ValueError(f"No observations for {stat.code}")
    return stat.total_value / stat.count
