#!/usr/bin/env python
"""Response types for forex currency endpoints."""

from __future__ import annotations

from pydantic import Field

from polygon_client.types.base import PolygonModel

__all__ = [
    "ForexCurrenciesAggregates",
    "ForexCurrenciesAggregatesResponse",
    "ForexCurrenciesGroupedDailyResponse",
    "ForexCurrenciesPreviousCloseResponse",
]


class ForexCurrenciesAggregates(PolygonModel):
    """One forex aggregate bar (no accumulated volume)."""

    ticker: str | None = Field(default=None, alias="T")
    close: float = Field(alias="c")
    high: float = Field(alias="h")
    low: float = Field(alias="l")
    transactions: int | None = Field(default=None, alias="n")
    open: float = Field(alias="o")
    timestamp: int | None = Field(default=None, alias="t")
    volume: float = Field(alias="v")
    vwap: float | None = Field(default=None, alias="vw")


class ForexCurrenciesAggregatesResponse(PolygonModel):
    ticker: str
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    results: list[ForexCurrenciesAggregates] = Field(default_factory=list)
    status: str
    request_id: str
    count: int | None = None


class ForexCurrenciesGroupedDailyResponse(PolygonModel):
    adjusted: bool
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    results: list[ForexCurrenciesAggregates] = Field(default_factory=list)
    status: str
    request_id: str | None = None
    count: int | None = None


class ForexCurrenciesPreviousCloseResponse(PolygonModel):
    ticker: str
    adjusted: bool
    query_count: int = Field(alias="queryCount")
    results_count: int = Field(alias="resultsCount")
    results: list[ForexCurrenciesAggregates] = Field(default_factory=list)
    status: str
    request_id: str | None = None
    count: int | None = None
