#!/usr/bin/env python
"""REST endpoint table.

Every REST operation is a GET on a path template whose response decodes into a
single type. The table below is the only place those pairs are spelled out;
``RESTClient`` looks endpoints up by name and formats their paths here.
"""

from __future__ import annotations

import datetime
import string
from enum import Enum
from typing import Any
from urllib.parse import quote

import attrs

from polygon_client.types import (
    CryptoAggregatesResponse,
    CryptoDailyOpenCloseResponse,
    CryptoExchangesResponse,
    CryptoGroupedDailyResponse,
    CryptoPreviousCloseResponse,
    ForexCurrenciesAggregatesResponse,
    ForexCurrenciesGroupedDailyResponse,
    ForexCurrenciesPreviousCloseResponse,
    ReferenceLocalesResponse,
    ReferenceMarketHolidaysResponse,
    ReferenceMarketsResponse,
    ReferenceMarketStatusNowResponse,
    ReferenceStockDividendsResponse,
    ReferenceStockFinancialsResponse,
    ReferenceStockFinancialsVXResponse,
    ReferenceStockSplitsResponse,
    ReferenceTickerDetailsResponse,
    ReferenceTickerDetailsResponseVX,
    ReferenceTickerNewsResponse,
    ReferenceTickersResponse,
    ReferenceTickerTypesResponse,
    StockEquitiesAggregatesResponse,
    StockEquitiesConditionMappingsResponse,
    StockEquitiesDailyOpenCloseResponse,
    StockEquitiesExchangesResponse,
    StockEquitiesGroupedDailyResponse,
    StockEquitiesHistoricTradesResponse,
    StockEquitiesLastQuoteForASymbolResponse,
    StockEquitiesPreviousCloseResponse,
    StockEquitiesSnapshotAllTickersResponse,
    StockEquitiesSnapshotGainersLosersResponse,
    StockEquitiesSnapshotSingleTickerResponse,
)

__all__ = [
    "ENDPOINTS",
    "Endpoint",
    "get_endpoint",
    "normalize_query_params",
    "path_value",
]

# Characters left unescaped in path segments (forex and crypto tickers use "C:" and "X:")
PATH_SAFE_CHARS = ":"


def path_value(value: Any) -> str:
    """Render a path or query value the way the API expects it.

    Enums contribute their ``.value``, dates their ISO form, booleans are
    lower-cased; everything else goes through ``str``.
    """
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def normalize_query_params(query_params: dict[str, Any] | None) -> dict[str, str]:
    """Drop ``None`` values and render the rest with ``path_value``."""
    if not query_params:
        return {}
    return {key: path_value(value) for key, value in query_params.items() if value is not None}


@attrs.define(slots=True, frozen=True)
class Endpoint:
    """A named GET endpoint.

    Attributes:
        name: Operation name, identical to the RESTClient method name
        path: Path template with ``{placeholder}`` segments
        response_type: Type the JSON body decodes into
    """

    name: str
    path: str
    response_type: Any = attrs.field(eq=False)

    @property
    def path_params(self) -> tuple[str, ...]:
        """Placeholder names in template order."""
        return tuple(field for _, field, _, _ in string.Formatter().parse(self.path) if field)

    def format_path(self, **path_params: Any) -> str:
        """Substitute and URL-quote path parameters.

        Raises:
            ValueError: If a placeholder is missing or an unknown parameter is given
        """
        expected = set(self.path_params)
        missing = expected - path_params.keys()
        if missing:
            raise ValueError(f"Endpoint {self.name} is missing path parameter(s): {', '.join(sorted(missing))}")
        unexpected = path_params.keys() - expected
        if unexpected:
            raise ValueError(f"Endpoint {self.name} got unexpected path parameter(s): {', '.join(sorted(unexpected))}")

        quoted = {key: quote(path_value(value), safe=PATH_SAFE_CHARS) for key, value in path_params.items()}
        return self.path.format(**quoted)


_ENDPOINT_LIST = (
    # Reference data
    Endpoint("reference_tickers", "/v3/reference/tickers", ReferenceTickersResponse),
    Endpoint("reference_ticker_types", "/v2/reference/types", ReferenceTickerTypesResponse),
    Endpoint(
        "reference_ticker_details",
        "/v1/meta/symbols/{stocks_ticker}/company",
        ReferenceTickerDetailsResponse,
    ),
    Endpoint(
        "reference_ticker_details_vx",
        "/vX/reference/tickers/{stocks_ticker}",
        ReferenceTickerDetailsResponseVX,
    ),
    Endpoint("reference_ticker_news", "/v2/reference/news", ReferenceTickerNewsResponse),
    Endpoint("reference_markets", "/v2/reference/markets", ReferenceMarketsResponse),
    Endpoint("reference_locales", "/v2/reference/locales", ReferenceLocalesResponse),
    Endpoint(
        "reference_stock_splits",
        "/v2/reference/splits/{stocks_ticker}",
        ReferenceStockSplitsResponse,
    ),
    # Ticker goes in the query string for v3 dividends
    Endpoint("reference_stock_dividends", "/v3/reference/dividends", ReferenceStockDividendsResponse),
    Endpoint(
        "reference_stock_financials",
        "/v2/reference/financials/{stocks_ticker}",
        ReferenceStockFinancialsResponse,
    ),
    Endpoint("reference_stock_financials_vx", "/vX/reference/financials", ReferenceStockFinancialsVXResponse),
    Endpoint("reference_market_holidays", "/v1/marketstatus/upcoming", ReferenceMarketHolidaysResponse),
    Endpoint("reference_market_status", "/v1/marketstatus/now", ReferenceMarketStatusNowResponse),
    # Stock equities
    Endpoint("stock_equities_exchanges", "/v1/meta/exchanges", StockEquitiesExchangesResponse),
    Endpoint(
        "stock_equities_condition_mappings",
        "/v1/meta/conditions/{tick_type}",
        StockEquitiesConditionMappingsResponse,
    ),
    Endpoint(
        "stock_equities_historic_trades",
        "/v2/last/trade/{stocks_ticker}",
        StockEquitiesHistoricTradesResponse,
    ),
    Endpoint(
        "stock_equities_last_quote_for_a_symbol",
        "/v2/last/nbbo/{stocks_ticker}",
        StockEquitiesLastQuoteForASymbolResponse,
    ),
    Endpoint(
        "stock_equities_daily_open_close",
        "/v1/open-close/{stocks_ticker}/{date}",
        StockEquitiesDailyOpenCloseResponse,
    ),
    Endpoint(
        "stock_equities_aggregates",
        "/v2/aggs/ticker/{stocks_ticker}/range/{multiplier}/{timespan}/{from_}/{to}",
        StockEquitiesAggregatesResponse,
    ),
    Endpoint(
        "stock_equities_grouped_daily",
        "/v2/aggs/grouped/locale/{locale}/market/{market}/{date}",
        StockEquitiesGroupedDailyResponse,
    ),
    Endpoint(
        "stock_equities_previous_close",
        "/v2/aggs/ticker/{stocks_ticker}/prev",
        StockEquitiesPreviousCloseResponse,
    ),
    Endpoint(
        "stock_equities_snapshot_all_tickers",
        "/v2/snapshot/locale/{locale}/markets/stocks/tickers",
        StockEquitiesSnapshotAllTickersResponse,
    ),
    Endpoint(
        "stock_equities_snapshot_single_ticker",
        "/v2/snapshot/locale/{locale}/markets/stocks/tickers/{ticker}",
        StockEquitiesSnapshotSingleTickerResponse,
    ),
    Endpoint(
        "stock_equities_snapshot_gainers_losers",
        "/v2/snapshot/locale/{locale}/markets/stocks/{direction}",
        StockEquitiesSnapshotGainersLosersResponse,
    ),
    # Forex
    Endpoint(
        "forex_currencies_aggregates",
        "/v2/aggs/ticker/{forex_ticker}/range/{multiplier}/{timespan}/{from_}/{to}",
        ForexCurrenciesAggregatesResponse,
    ),
    Endpoint(
        "forex_currencies_grouped_daily",
        "/v2/aggs/grouped/locale/global/market/fx/{date}",
        ForexCurrenciesGroupedDailyResponse,
    ),
    Endpoint(
        "forex_currencies_previous_close",
        "/v2/aggs/ticker/{forex_ticker}/prev",
        ForexCurrenciesPreviousCloseResponse,
    ),
    # Crypto
    Endpoint("crypto_crypto_exchanges", "/v1/meta/crypto-exchanges", CryptoExchangesResponse),
    Endpoint(
        "crypto_daily_open_close",
        "/v1/open-close/crypto/{from_}/{to}/{date}",
        CryptoDailyOpenCloseResponse,
    ),
    Endpoint(
        "crypto_aggregates",
        "/v2/aggs/ticker/{crypto_ticker}/range/{multiplier}/{timespan}/{from_}/{to}",
        CryptoAggregatesResponse,
    ),
    Endpoint(
        "crypto_grouped_daily",
        "/v2/aggs/grouped/locale/global/market/crypto/{date}",
        CryptoGroupedDailyResponse,
    ),
    Endpoint(
        "crypto_previous_close",
        "/v2/aggs/ticker/{crypto_ticker}/prev",
        CryptoPreviousCloseResponse,
    ),
)

ENDPOINTS: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in _ENDPOINT_LIST}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by operation name.

    Raises:
        KeyError: If no endpoint has that name
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {name}") from None
