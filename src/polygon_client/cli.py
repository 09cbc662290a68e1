#!/usr/bin/env python
"""Command line interface for the polygon.io client.

Commands:
    dividend-yield  Trailing twelve-month dividend yield for one or more tickers
    stream          Print live frames from a WebSocket cluster

Both commands read the API key from ``--auth-key`` or ``POLYGON_AUTH_KEY``.
"""

from __future__ import annotations

import asyncio
import datetime
from typing import List, Optional

import attrs
import pendulum
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from polygon_client.rest.client import RESTClient
from polygon_client.types import ReferenceStockDividendsResult
from polygon_client.utils.exceptions import ConfigurationError, PolygonError
from polygon_client.utils.loguru_setup import configure_level, logger
from polygon_client.websocket.client import WebSocketClient
from polygon_client.websocket.cluster import Cluster

__all__ = [
    "DividendYield",
    "app",
    "compute_dividend_yield",
]

# Dividends with an ex-dividend date inside this window count towards the yield
YIELD_WINDOW_DAYS = 365

app = typer.Typer(
    name="polygon-client",
    help="Query the polygon.io REST API and stream its WebSocket feed.",
    no_args_is_help=True,
)
console = Console()


@attrs.define(slots=True, frozen=True)
class DividendYield:
    """Trailing dividend yield for one ticker."""

    ticker: str
    previous_close: float
    dividend_sum: float
    dividend_count: int

    @property
    def percent(self) -> float:
        return self.dividend_sum / self.previous_close * 100


def compute_dividend_yield(
    ticker: str,
    dividends: list[ReferenceStockDividendsResult],
    previous_close: float,
    today: datetime.date,
) -> DividendYield:
    """Sum dividends paid in the trailing window and relate them to the close.

    Args:
        ticker: Ticker symbol
        dividends: Dividend records for the ticker
        previous_close: Previous session's closing price
        today: Reference day; the window is ``(today - 365 days, today]``

    Returns:
        DividendYield

    Raises:
        PolygonError: If the closing price is not positive or an ex-dividend date does not parse
    """
    if previous_close <= 0:
        raise PolygonError(f"Previous close for {ticker} is not positive: {previous_close}")

    cutoff = pendulum.Date(today.year, today.month, today.day).subtract(days=YIELD_WINDOW_DAYS)
    recent = [dividend for dividend in dividends if cutoff < _ex_dividend_day(ticker, dividend) <= today]
    return DividendYield(
        ticker=ticker,
        previous_close=previous_close,
        dividend_sum=sum(dividend.cash_amount for dividend in recent),
        dividend_count=len(recent),
    )


def _ex_dividend_day(ticker: str, dividend: ReferenceStockDividendsResult) -> datetime.date:
    try:
        parsed = pendulum.parse(dividend.ex_dividend_date)
    except ValueError as e:
        raise PolygonError(f"Invalid ex-dividend date for {ticker}: {dividend.ex_dividend_date!r}") from e
    # durations and bare times parse too but carry no calendar day
    if not isinstance(parsed, pendulum.DateTime):
        raise PolygonError(f"Invalid ex-dividend date for {ticker}: {dividend.ex_dividend_date!r}")
    return parsed.date()


def _fetch_dividend_yield(client: RESTClient, ticker: str, today: datetime.date) -> DividendYield:
    dividends = client.reference_stock_dividends(ticker)
    previous = client.stock_equities_previous_close(ticker)
    if not previous.results:
        raise PolygonError(f"No previous close available for {ticker}")
    return compute_dividend_yield(ticker, dividends.results, previous.results[0].close, today)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR). Defaults to POLYGON_LOG_LEVEL."
    ),
):
    """polygon.io client tools."""
    if log_level:
        try:
            configure_level(log_level)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command("dividend-yield")
def dividend_yield(
    tickers: List[str] = typer.Argument(..., help="Ticker symbols, e.g. AAPL MSFT"),
    auth_key: Optional[str] = typer.Option(None, "--auth-key", help="API key (defaults to POLYGON_AUTH_KEY)"),
    timeout: float = typer.Option(30.0, "--timeout", help="Request timeout in seconds"),
):
    """Show the trailing twelve-month dividend yield of each ticker."""
    try:
        client = RESTClient(auth_key, timeout=timeout)
    except ConfigurationError as e:
        console.print(f"[bold red]{escape(e.message)}[/bold red]")
        raise typer.Exit(code=1) from e

    today = pendulum.today("UTC").date()
    table = Table(title=f"Dividend yield as of {today.isoformat()}")
    table.add_column("Ticker", style="cyan")
    table.add_column("Yield", justify="right", style="green")
    table.add_column("Prev close", justify="right")
    table.add_column("Dividends", justify="right")
    table.add_column("Count", justify="right")

    failed = []
    with client:
        for ticker in tickers:
            try:
                result = _fetch_dividend_yield(client, ticker, today)
            except PolygonError as e:
                logger.debug(f"Dividend yield lookup failed for {ticker}: {e.message}")
                console.print(f"[yellow]Skipping {escape(ticker)}: {escape(e.message)}[/yellow]")
                failed.append(ticker)
                continue
            table.add_row(
                result.ticker,
                f"{result.percent:.2f}%",
                f"{result.previous_close:.2f}",
                f"{result.dividend_sum:.4f}",
                str(result.dividend_count),
            )

    console.print(table)
    if len(failed) == len(tickers):
        raise typer.Exit(code=1)


async def _stream(
    cluster: Cluster,
    patterns: List[str],
    auth_key: Optional[str],
    limit: Optional[int],
    timeout: Optional[float],
) -> int:
    received = 0
    async with await WebSocketClient.connect(cluster, auth_key, timeout=timeout) as session:
        await session.subscribe(patterns)
        async for frame in session:
            text = frame.decode("utf-8", errors="replace") if isinstance(frame, bytes) else frame
            console.print(text, markup=False, highlight=False)
            received += 1
            if limit is not None and received >= limit:
                break
    return received


@app.command()
def stream(
    cluster: str = typer.Argument(..., help="Cluster: stocks, forex or crypto"),
    patterns: List[str] = typer.Argument(..., help="Subscription patterns, e.g. T.MSFT Q.AAPL"),
    auth_key: Optional[str] = typer.Option(None, "--auth-key", help="API key (defaults to POLYGON_AUTH_KEY)"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Stop after this many frames"),
    timeout: Optional[float] = typer.Option(10.0, "--timeout", help="Connect timeout in seconds"),
):
    """Subscribe to patterns on a cluster and print frames as they arrive."""
    try:
        parsed_cluster = Cluster.from_string(cluster)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="CLUSTER") from e

    try:
        received = asyncio.run(_stream(parsed_cluster, patterns, auth_key, limit, timeout))
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        return
    except PolygonError as e:
        console.print(f"[bold red]{escape(e.message)}[/bold red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Received {received} frame(s)[/green]")


if __name__ == "__main__":
    app()
