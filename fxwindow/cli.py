"""CLI entry point for fxwindow."""

from __future__ import annotations

import asyncio
import sys
from datetime import date

import click
import httpx

from fxwindow import formatters, fx
from fxwindow.logger import configure
from fxwindow.models import CollectionResult
from fxwindow.window import DEFAULT_WINDOW_DAYS, date_window


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise click.BadParameter(
            f"Invalid date format: {value!r}. Use YYYY-MM-DD."
        ) from exc


async def _run_collection(
    end_date: date,
    days: int,
    base_url: str,
    timeout: float,
    continue_on_error: bool,
) -> CollectionResult:
    result = CollectionResult(end_date=end_date, days_requested=days)
    async with httpx.AsyncClient(timeout=timeout) as client:
        await fx.collect_window(
            client,
            result,
            date_window(end_date, days),
            continue_on_error=continue_on_error,
            base_url=base_url,
        )
    return result


@click.command()
@click.option("--date", "end_date", required=False, help="Last day of the window (YYYY-MM-DD, default: today)")
@click.option(
    "--days",
    default=DEFAULT_WINDOW_DAYS,
    type=int,
    help=f"Number of calendar days in the window (default: {DEFAULT_WINDOW_DAYS})",
)
@click.option("--base-url", default=fx.BASE_URL, help="Daily rates endpoint")
@click.option(
    "--timeout",
    default=fx.DEFAULT_TIMEOUT,
    type=float,
    help="Per-request timeout in seconds",
)
@click.option(
    "--continue-on-error",
    is_flag=True,
    help="Skip days that fail instead of stopping at the first failure",
)
@click.option(
    "--output",
    "output_format",
    default="text",
    type=click.Choice(["text", "table", "json", "csv"]),
    help="Output format",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each request to stderr")
def main(
    end_date: str | None,
    days: int,
    base_url: str,
    timeout: float,
    continue_on_error: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """CBR reference rate window statistics.

    Fetches the Bank of Russia daily rates for each day of a trailing window
    and reports, per currency, the maximum and minimum rate with their dates
    and the mean rate.
    """
    configure(verbose)

    if days <= 0:
        click.echo("Error: --days must be positive.", err=True)
        sys.exit(1)

    ed = _parse_date(end_date) if end_date else date.today()

    try:
        result = asyncio.run(
            _run_collection(ed, days, base_url, timeout, continue_on_error)
        )
    except Exception as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    # Failures are reported but the partial aggregate is still printed.
    for err in result.errors:
        click.echo(f"Error: {err}", err=True)

    if output_format == "json":
        click.echo(formatters.format_json(result))
    elif output_format == "csv":
        click.echo(formatters.format_csv(result), nl=False)
    elif output_format == "table":
        click.echo(formatters.format_table(result), nl=False)
    else:
        click.echo(formatters.format_lines(result), nl=False)


if __name__ == "__main__":
    main()
