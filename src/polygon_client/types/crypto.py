#!/usr/bin/env python
"""Response types for crypto endpoints."""

from __future__ import annotations

from pydantic import Field

from polygon_client.types.base import PolygonModel

__all__ = [
    "CryptoAggregates",
    "CryptoAggregatesResponse",
    "CryptoDailyOpenCloseResponse",
    "CryptoExchange",
    "CryptoExchangesResponse",
    "CryptoGroupedDailyResponse",
    "CryptoOpenTrades",
    "CryptoPreviousCloseResponse",
]


# v1/meta/crypto-exchanges


class CryptoExchange(PolygonModel):
    id: int
    exchange_type: str | None = Field(default=None, alias="type")
    market: str
    name: str
    url: str
    locale: str | None = None
    tier: str | None = None


CryptoExchangesResponse = list[CryptoExchange]


# v1/open-close/crypto/{from}/{to}/{date}


class CryptoOpenTrades(PolygonModel):
    exchange: int = Field(alias="x")
    price: float = Field(alias="p")
    size: float = Field(alias="s")
    conditions: list[int] = Field(default_factory=list, alias="c")
    trade_id: str = Field(alias="i")
    timestamp: int = Field(alias="t")


class CryptoDailyOpenCloseResponse(PolygonModel):
    symbol: str
    is_utc: bool = Field(alias="isUTC")
    day: str
    open: float
    close: float
    open_trades: list[CryptoOpenTrades] = Field(default_factory=list, alias="openTrades")


# v2/aggs


class CryptoAggregates(PolygonModel):
    """One crypto aggregate bar."""

    ticker: str | None = Field(default=None, alias="T")
    close: float = Field(alias="c")
    high: float = Field(alias="h")
    low: float = Field(alias="l")
    transactions: int | None = Field(default=None, alias="n")
    open: float = Field(alias="o")
    timestamp: int | None = Field(default=None, alias="t")
    volume: float = Field(alias="v")
    vwap: float | None = Field(default=None, alias="vw")


class CryptoAggregatesResponse(PolygonModel):
    ticker: str
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    results: list[CryptoAggregates] = Field(default_factory=list)
    status: str
    request_id: str
    count: int | None = None


class CryptoGroupedDailyResponse(PolygonModel):
    adjusted: bool
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    results: list[CryptoAggregates] = Field(default_factory=list)
    status: str
    request_id: str | None = None
    count: int | None = None


class CryptoPreviousCloseResponse(PolygonModel):
    ticker: str
    adjusted: bool
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    results: list[CryptoAggregates] = Field(default_factory=list)
    status: str
    request_id: str | None = None
    count: int | None = None
