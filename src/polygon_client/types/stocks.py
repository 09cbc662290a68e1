#!/usr/bin/env python
"""Response types for stock equities endpoints.

The aggregate and snapshot payloads use single-letter JSON keys (``o``, ``h``,
``vw``...). Models expose descriptive attribute names and keep the wire keys as
aliases, so ``bar.close`` and ``StockEquitiesAggregates(c=1.0, ...)`` both work.
"""

from __future__ import annotations

from pydantic import Field

from polygon_client.types.base import PolygonModel

__all__ = [
    "StockEquitiesAggregates",
    "StockEquitiesAggregatesResponse",
    "StockEquitiesConditionMappingsResponse",
    "StockEquitiesDailyOpenCloseResponse",
    "StockEquitiesExchange",
    "StockEquitiesExchangesResponse",
    "StockEquitiesGroupedDailyResponse",
    "StockEquitiesHistoricTradesResponse",
    "StockEquitiesLastQuoteForASymbolResponse",
    "StockEquitiesPreviousCloseResponse",
    "StockEquitiesQuote",
    "StockEquitiesSnapshotAllTickersResponse",
    "StockEquitiesSnapshotGainersLosersResponse",
    "StockEquitiesSnapshotSingleTickerResponse",
    "StockEquitiesTickerSnapshot",
    "StockEquitiesTrade",
]


# v1/meta/exchanges


class StockEquitiesExchange(PolygonModel):
    id: int
    exchange_type: str = Field(alias="type")
    market: str
    mic: str | None = None
    name: str
    tape: str | None = None
    code: str | None = None


StockEquitiesExchangesResponse = list[StockEquitiesExchange]

# v1/meta/conditions/{tick_type}
StockEquitiesConditionMappingsResponse = dict[int, str]


# v2/last/trade and v2/last/nbbo share one result shape


class StockEquitiesTrade(PolygonModel):
    """Last trade or last NBBO quote result; every field may be absent."""

    ticker: str | None = Field(default=None, alias="T")
    trf_timestamp: int | None = Field(default=None, alias="f")
    sequence_number: int | None = Field(default=None, alias="q")
    sip_timestamp: int | None = Field(default=None, alias="t")
    participant_timestamp: int | None = Field(default=None, alias="y")
    conditions: list[int] | None = Field(default=None, alias="c")
    correction: int | None = Field(default=None, alias="e")
    trade_id: str | None = Field(default=None, alias="i")
    price: float | None = Field(default=None, alias="p")
    trf_id: int | None = Field(default=None, alias="r")
    size: float | None = Field(default=None, alias="s")
    exchange: int | None = Field(default=None, alias="x")
    tape: int | None = Field(default=None, alias="z")


class StockEquitiesHistoricTradesResponse(PolygonModel):
    request_id: str
    status: str
    results: StockEquitiesTrade


class StockEquitiesLastQuoteForASymbolResponse(PolygonModel):
    request_id: str
    status: str
    results: StockEquitiesTrade


# v1/open-close/{stocks_ticker}/{date}


class StockEquitiesDailyOpenCloseResponse(PolygonModel):
    after_hours: float = Field(alias="afterHours")
    close: float
    from_date: str = Field(alias="from")
    high: float
    low: float
    open: float
    pre_market: float = Field(alias="preMarket")
    status: str
    symbol: str
    volume: float


# v2/aggs


class StockEquitiesAggregates(PolygonModel):
    """One aggregate bar."""

    ticker: str | None = Field(default=None, alias="T")
    accumulated_volume: float | None = Field(default=None, alias="av")
    close: float = Field(alias="c")
    high: float = Field(alias="h")
    low: float = Field(alias="l")
    transactions: int | None = Field(default=None, alias="n")
    open: float = Field(alias="o")
    timestamp: int | None = Field(default=None, alias="t")
    volume: float = Field(alias="v")
    vwap: float | None = Field(default=None, alias="vw")


class StockEquitiesAggregatesResponse(PolygonModel):
    ticker: str
    adjusted: bool
    query_count: int = Field(alias="queryCount")
    request_id: str
    results_count: int = Field(alias="resultsCount")
    count: int | None = None
    status: str
    results: list[StockEquitiesAggregates] = Field(default_factory=list)


class StockEquitiesGroupedDailyResponse(PolygonModel):
    adjusted: bool
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    status: str
    results: list[StockEquitiesAggregates] = Field(default_factory=list)


class StockEquitiesPreviousCloseResponse(PolygonModel):
    ticker: str
    adjusted: bool
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    count: int | None = None
    status: str
    results: list[StockEquitiesAggregates] = Field(default_factory=list)


# v2/snapshot


class StockEquitiesQuote(PolygonModel):
    ask_price: float = Field(alias="P")
    ask_size: float = Field(alias="S")
    bid_price: float = Field(alias="p")
    bid_size: float = Field(alias="s")
    timestamp: int = Field(alias="t")


class StockEquitiesTickerSnapshot(PolygonModel):
    day: StockEquitiesAggregates
    last_quote: StockEquitiesQuote = Field(alias="lastQuote")
    last_trade: StockEquitiesTrade = Field(alias="lastTrade")
    minute: StockEquitiesAggregates = Field(alias="min")
    prev_day: StockEquitiesAggregates = Field(alias="prevDay")
    ticker: str
    todays_change: float = Field(alias="todaysChange")
    todays_change_perc: float = Field(alias="todaysChangePerc")
    updated: int


class StockEquitiesSnapshotAllTickersResponse(PolygonModel):
    count: int
    status: str
    tickers: list[StockEquitiesTickerSnapshot]


class StockEquitiesSnapshotSingleTickerResponse(PolygonModel):
    status: str
    request_id: str | None = None
    ticker: StockEquitiesTickerSnapshot


class StockEquitiesSnapshotGainersLosersResponse(PolygonModel):
    status: str
    tickers: list[StockEquitiesTickerSnapshot]
