#!/usr/bin/env python
"""Response types for the reference data endpoints."""

from __future__ import annotations

from pydantic import Field

from polygon_client.types.base import PolygonModel
from polygon_client.types.enums import DividendType

__all__ = [
    "Address",
    "Locale",
    "Market",
    "MarketStatusUpcoming",
    "Publisher",
    "ReferenceLocalesResponse",
    "ReferenceMarketHolidaysResponse",
    "ReferenceMarketStatusNowResponse",
    "ReferenceMarketsResponse",
    "ReferenceStockDividendsResponse",
    "ReferenceStockDividendsResult",
    "ReferenceStockSplitsResponse",
    "ReferenceStockSplitsResult",
    "ReferenceTickerDetailsResponse",
    "ReferenceTickerDetailsResponseVX",
    "ReferenceTickerDetailsResultsVX",
    "ReferenceTickerNewsResponse",
    "ReferenceTickerNewsResult",
    "ReferenceTickerTypesResponse",
    "ReferenceTickerTypesResults",
    "ReferenceTicker",
    "ReferenceTickersResponse",
]


# v3/reference/tickers


class ReferenceTicker(PolygonModel):
    ticker: str
    name: str
    market: str
    locale: str
    primary_exchange: str
    ticker_type: str | None = Field(default=None, alias="type")
    active: bool
    currency_name: str
    cik: str | None = None
    composite_figi: str | None = None
    share_class_figi: str | None = None
    last_updated_utc: str


class ReferenceTickersResponse(PolygonModel):
    results: list[ReferenceTicker]
    status: str
    request_id: str
    count: int
    next_url: str | None = None


# v2/reference/types


class ReferenceTickerTypesResults(PolygonModel):
    types: dict[str, str]
    index_types: dict[str, str] = Field(alias="indexTypes")


class ReferenceTickerTypesResponse(PolygonModel):
    status: str
    results: ReferenceTickerTypesResults


# v1/meta/symbols/{stocks_ticker}/company


class ReferenceTickerDetailsResponse(PolygonModel):
    """Company details for a single ticker (v1)."""

    logo: str
    exchange: str
    exchange_symbol: str = Field(alias="exchangeSymbol")
    ticker_type: str = Field(alias="type")
    name: str
    symbol: str
    listdate: str
    cik: str
    bloomberg: str
    figi: str | None = None
    sic: int
    country: str
    industry: str
    sector: str
    marketcap: int
    employees: int
    phone: str
    ceo: str
    url: str
    description: str
    hq_address: str
    hq_country: str
    similar: list[str]
    tags: list[str]
    updated: str
    active: bool


# vX/reference/tickers/{stocks_ticker}


class Address(PolygonModel):
    address1: str
    city: str
    state: str


class ReferenceTickerDetailsResultsVX(PolygonModel):
    ticker: str
    name: str
    market: str
    locale: str
    primary_exchange: str
    ticker_type: str = Field(alias="type")
    active: bool
    currency_name: str
    cik: str
    composite_figi: str | None = None
    share_class_figi: str | None = None
    last_updated_utc: str
    delisted_utc: str | None = None
    outstanding_shares: float
    market_cap: float
    phone_number: str
    address: Address


class ReferenceTickerDetailsResponseVX(PolygonModel):
    results: ReferenceTickerDetailsResultsVX
    status: str
    request_id: str
    count: int | None = None


# v2/reference/news


class Publisher(PolygonModel):
    name: str
    homepage_url: str
    logo_url: str
    favicon_url: str | None = None


class ReferenceTickerNewsResult(PolygonModel):
    id: str
    publisher: Publisher
    title: str
    author: str
    published_utc: str
    article_url: str
    tickers: list[str] | None = None
    amp_url: str | None = None
    image_url: str | None = None
    description: str | None = None
    keywords: list[str] | None = None


class ReferenceTickerNewsResponse(PolygonModel):
    results: list[ReferenceTickerNewsResult]
    status: str
    request_id: str
    count: int
    next_url: str | None = None


# v2/reference/markets


class Market(PolygonModel):
    market: str
    desc: str


class ReferenceMarketsResponse(PolygonModel):
    status: str
    results: list[Market]


# v2/reference/locales


class Locale(PolygonModel):
    locale: str
    name: str


class ReferenceLocalesResponse(PolygonModel):
    status: str
    results: list[Locale]


# v2/reference/splits/{stocks_ticker}


class ReferenceStockSplitsResult(PolygonModel):
    ticker: str
    ex_date: str = Field(alias="exDate")
    payment_date: str = Field(alias="paymentDate")
    declared_date: str | None = Field(default=None, alias="declaredDate")
    ratio: float
    tofactor: int | None = None
    forfactor: int | None = None


class ReferenceStockSplitsResponse(PolygonModel):
    status: str
    count: int
    results: list[ReferenceStockSplitsResult]


# v3/reference/dividends


class ReferenceStockDividendsResult(PolygonModel):
    cash_amount: float
    currency: str
    declaration_date: str
    dividend_type: DividendType
    ex_dividend_date: str
    frequency: int
    pay_date: str
    record_date: str
    ticker: str


class ReferenceStockDividendsResponse(PolygonModel):
    next_url: str | None = None
    results: list[ReferenceStockDividendsResult]
    status: str


# v1/marketstatus/upcoming


class MarketStatusUpcoming(PolygonModel):
    exchange: str
    name: str
    date: str
    status: str
    open: str | None = None
    close: str | None = None


ReferenceMarketHolidaysResponse = list[MarketStatusUpcoming]


# v1/marketstatus/now


class ReferenceMarketStatusNowResponse(PolygonModel):
    market: str
    early_hours: bool = Field(alias="earlyHours")
    after_hours: bool = Field(alias="afterHours")
    server_time: str = Field(alias="serverTime")
    exchanges: dict[str, str]
    currencies: dict[str, str]
