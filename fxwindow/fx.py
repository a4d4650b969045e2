"""Async client for the Bank of Russia daily rates (XML_daily_eng.asp).

One document per calendar day. Rates use a comma decimal separator and the
prolog may declare a legacy encoding such as windows-1251.
"""

from __future__ import annotations

from collections.abc import Iterable

import httpx
from lxml import etree

from fxwindow import aggregate
from fxwindow.errors import DecodeError, FxWindowError, ParseError, TransportError
from fxwindow.logger import get_logger
from fxwindow.models import CollectionResult, RateRecord

BASE_URL = "http://www.cbr.ru/scripts/XML_daily_eng.asp"
# The service rejects default client identifiers.
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:89.0) Gecko/20100101 Firefox/89.0"
)
DEFAULT_TIMEOUT = 30.0

LOGGER = get_logger(__name__)


def build_url(date_str: str, base_url: str = BASE_URL) -> str:
    return str(httpx.URL(base_url, params={"date_req": date_str}))


def parse_rate(text: str | None, date_str: str | None = None) -> float:
    """Parse a locale-formatted rate: "65,4321" -> 65.4321."""
    raw = (text or "").strip()
    try:
        return float(raw.replace(",", ".", 1))
    except ValueError as exc:
        raise ParseError(f"Invalid rate value {raw!r}", date_str) from exc


def _child_text(node: etree._Element, tag: str, date_str: str | None) -> str:
    child = node.find(tag)
    if child is None or child.text is None:
        raise DecodeError(f"Valute element without <{tag}>", date_str)
    return child.text.strip()


def _child_int(node: etree._Element, tag: str, date_str: str | None) -> int:
    text = _child_text(node, tag, date_str)
    try:
        return int(text)
    except ValueError as exc:
        raise DecodeError(f"Invalid <{tag}> value {text!r}", date_str) from exc


def _child_rate(node: etree._Element, date_str: str | None) -> float:
    child = node.find("Value")
    if child is None:
        raise DecodeError("Valute element without <Value>", date_str)
    return parse_rate(child.text, date_str)


def parse_rates(body: bytes, date_str: str | None = None) -> list[RateRecord]:
    """Decode a ValCurs document into rate records.

    The body is handed to lxml as bytes so the declared encoding is applied.
    """
    try:
        root = etree.fromstring(body)
    except (etree.XMLSyntaxError, LookupError, ValueError) as exc:
        raise DecodeError(f"Malformed XML document: {exc}", date_str) from exc

    if root.tag != "ValCurs":
        raise DecodeError(f"Unexpected root element <{root.tag}>", date_str)

    records: list[RateRecord] = []
    for node in root.findall("Valute"):
        records.append(
            RateRecord(
                num_code=_child_int(node, "NumCode", date_str),
                char_code=_child_text(node, "CharCode", date_str),
                nominal=_child_int(node, "Nominal", date_str),
                name=_child_text(node, "Name", date_str),
                value=_child_rate(node, date_str),
                valute_id=node.get("ID"),
            )
        )
    return records


async def fetch_rates(
    client: httpx.AsyncClient,
    date_str: str,
    base_url: str = BASE_URL,
) -> list[RateRecord]:
    """Fetch and decode the rates published for one DD/MM/YYYY date."""
    LOGGER.debug("Fetching rates for %s", date_str)
    try:
        resp = await client.get(
            build_url(date_str, base_url),
            headers={"User-Agent": USER_AGENT},
        )
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise TransportError(f"Request failed: {exc}", date_str) from exc

    return parse_rates(resp.content, date_str)


async def collect_window(
    client: httpx.AsyncClient,
    result: CollectionResult,
    dates: Iterable[str],
    continue_on_error: bool = False,
    base_url: str = BASE_URL,
) -> CollectionResult:
    """Fetch each date in turn and aggregate into ``result.stats``.

    On a failed date the loop stops, leaving the partial aggregate, unless
    ``continue_on_error`` is set, in which case the date is skipped.
    """
    for date_str in dates:
        try:
            records = await fetch_rates(client, date_str, base_url)
        except FxWindowError as exc:
            result.errors.append(str(exc))
            if not continue_on_error:
                LOGGER.info("Stopping after failure: %s", exc)
                result.aborted = True
                break
            LOGGER.info("Skipping date after failure: %s", exc)
            continue

        aggregate.update(result.stats, records, date_str)
        result.days_collected += 1

    LOGGER.info(
        "Collected %d of %d days, %d currencies",
        result.days_collected,
        result.days_requested,
        len(result.stats),
    )
    return result
