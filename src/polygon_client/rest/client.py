#!/usr/bin/env python
"""Synchronous REST client for the polygon.io API.

Every public method is a thin wrapper over ``RESTClient.fetch``: it names an
endpoint from ``polygon_client.rest.endpoints``, supplies the path parameters
and passes caller-supplied query parameters through unchanged.

Example:
    >>> from polygon_client import RESTClient
    >>> with RESTClient("my-key", timeout=10) as client:
    ...     prev = client.stock_equities_previous_close("AAPL")
    ...     print(prev.results[0].close)
"""

from __future__ import annotations

import datetime
import json
from typing import Any

import httpx

from polygon_client.rest.endpoints import get_endpoint, normalize_query_params
from polygon_client.types import (
    CryptoAggregatesResponse,
    CryptoDailyOpenCloseResponse,
    CryptoExchange,
    CryptoGroupedDailyResponse,
    CryptoPreviousCloseResponse,
    ForexCurrenciesAggregatesResponse,
    ForexCurrenciesGroupedDailyResponse,
    ForexCurrenciesPreviousCloseResponse,
    MarketStatusUpcoming,
    ReferenceLocalesResponse,
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
    SnapshotDirection,
    StockEquitiesAggregatesResponse,
    StockEquitiesDailyOpenCloseResponse,
    StockEquitiesExchange,
    StockEquitiesGroupedDailyResponse,
    StockEquitiesHistoricTradesResponse,
    StockEquitiesLastQuoteForASymbolResponse,
    StockEquitiesPreviousCloseResponse,
    StockEquitiesSnapshotAllTickersResponse,
    StockEquitiesSnapshotGainersLosersResponse,
    StockEquitiesSnapshotSingleTickerResponse,
    TickType,
    Timespan,
    decode_response,
)
from polygon_client.utils.config import ERROR_BODY_PREVIEW_LENGTH, ClientConfig
from polygon_client.utils.exceptions import DecodeError, HTTPError, NetworkError, RestTimeoutError
from polygon_client.utils.loguru_setup import logger
from polygon_client.utils.network import create_httpx_client, safely_close_client

__all__ = ["RESTClient"]

QueryParams = dict[str, Any] | None
DateLike = str | datetime.date
TimespanLike = Timespan | str

DEFAULT_LOCALE = "us"


class RESTClient:
    """polygon.io REST client.

    Configuration (credential, base URL, timeout) is resolved once when the
    client is built. The underlying httpx client is created on first use.

    Args:
        auth_key: API key. Falls back to ``POLYGON_AUTH_KEY``.
        timeout: Request timeout in seconds. None waits indefinitely.
        config: Pre-resolved configuration; when given, ``auth_key`` and
            ``timeout`` are ignored and the environment is not read.
        client: Optional pre-configured ``httpx.Client``. It is closed by
            ``close()`` like one created internally.

    Raises:
        MissingCredentialError: If no credential is available
    """

    def __init__(
        self,
        auth_key: str | None = None,
        timeout: float | None = None,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config if config is not None else ClientConfig.resolve(auth_key, timeout)
        self._client = client

        logger.debug(f"Initialized RESTClient for {self.config.api_url} (timeout={self.config.timeout})")

    def _ensure_client(self) -> httpx.Client:
        """Ensure HTTP client is initialized.

        Returns:
            httpx.Client instance
        """
        if self._client is None:
            self._client = create_httpx_client(timeout=self.config.timeout)
        return self._client

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        if self._client is not None:
            safely_close_client(self._client)
            self._client = None

    def __enter__(self) -> RESTClient:
        """Context manager entry."""
        self._ensure_client()
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"RESTClient(api_url={self.config.api_url!r}, timeout={self.config.timeout!r})"

    # Generic request path

    def fetch(self, endpoint: str, query_params: QueryParams = None, **path_params: Any) -> Any:
        """Issue a GET for a named endpoint and decode the response.

        Args:
            endpoint: Endpoint name (same as the corresponding method name)
            query_params: Query string parameters, passed through verbatim
                except that ``None`` values are dropped and enums use their value
            **path_params: Values for the endpoint's path placeholders

        Returns:
            Decoded response of the endpoint's response type

        Raises:
            KeyError: Unknown endpoint name
            ValueError: Missing or unexpected path parameters
            RestTimeoutError: The request timed out
            NetworkError: DNS, connect or read failure
            HTTPError: The API answered with a non-2xx status
            DecodeError: Body is not JSON or does not match the response type
        """
        definition = get_endpoint(endpoint)
        url = f"{self.config.api_url}{definition.format_path(**path_params)}"
        params = normalize_query_params(query_params)
        payload = self._get_json(url, params)
        return decode_response(definition.response_type, payload)

    def _get_json(self, url: str, params: dict[str, str]) -> Any:
        client = self._ensure_client()
        headers = {"Authorization": f"Bearer {self.config.auth_key}"}

        logger.debug(f"GET {url} params={params}")
        try:
            response = client.get(url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            raise RestTimeoutError(f"Timeout requesting {url}: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Network error requesting {url}: {e}") from e

        if not response.is_success:
            body = response.text[:ERROR_BODY_PREVIEW_LENGTH]
            raise HTTPError(
                response.status_code,
                f"HTTP {response.status_code} from {url}: {body}",
                url=url,
                body=body,
            )

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(
                f"Response from {url} is not valid JSON: {e}",
                payload_preview=response.text[:ERROR_BODY_PREVIEW_LENGTH],
            ) from e

    # Reference data

    def reference_tickers(self, query_params: QueryParams = None) -> ReferenceTickersResponse:
        """List supported tickers (``/v3/reference/tickers``)."""
        return self.fetch("reference_tickers", query_params)

    def reference_ticker_types(self, query_params: QueryParams = None) -> ReferenceTickerTypesResponse:
        return self.fetch("reference_ticker_types", query_params)

    def reference_ticker_details(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> ReferenceTickerDetailsResponse:
        return self.fetch("reference_ticker_details", query_params, stocks_ticker=stocks_ticker)

    def reference_ticker_details_vx(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> ReferenceTickerDetailsResponseVX:
        return self.fetch("reference_ticker_details_vx", query_params, stocks_ticker=stocks_ticker)

    def reference_ticker_news(self, query_params: QueryParams = None) -> ReferenceTickerNewsResponse:
        return self.fetch("reference_ticker_news", query_params)

    def reference_markets(self, query_params: QueryParams = None) -> ReferenceMarketsResponse:
        return self.fetch("reference_markets", query_params)

    def reference_locales(self, query_params: QueryParams = None) -> ReferenceLocalesResponse:
        return self.fetch("reference_locales", query_params)

    def reference_stock_splits(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> ReferenceStockSplitsResponse:
        return self.fetch("reference_stock_splits", query_params, stocks_ticker=stocks_ticker)

    def reference_stock_dividends(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> ReferenceStockDividendsResponse:
        """Dividends for a ticker (``/v3/reference/dividends?ticker=...``).

        The ticker is sent as the ``ticker`` query parameter and overrides a
        ``ticker`` entry in ``query_params``.
        """
        params = dict(query_params or {})
        params["ticker"] = stocks_ticker
        return self.fetch("reference_stock_dividends", params)

    def reference_stock_financials(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> ReferenceStockFinancialsResponse:
        return self.fetch("reference_stock_financials", query_params, stocks_ticker=stocks_ticker)

    def reference_stock_financials_vx(self, query_params: QueryParams = None) -> ReferenceStockFinancialsVXResponse:
        """XBRL financial statements (``/vX/reference/financials``).

        Filter with query parameters such as ``ticker``, ``cik`` or ``filing_date``.
        """
        return self.fetch("reference_stock_financials_vx", query_params)

    def reference_market_holidays(self, query_params: QueryParams = None) -> list[MarketStatusUpcoming]:
        return self.fetch("reference_market_holidays", query_params)

    def reference_market_status(self, query_params: QueryParams = None) -> ReferenceMarketStatusNowResponse:
        return self.fetch("reference_market_status", query_params)

    # Stock equities

    def stock_equities_exchanges(self, query_params: QueryParams = None) -> list[StockEquitiesExchange]:
        return self.fetch("stock_equities_exchanges", query_params)

    def stock_equities_condition_mappings(
        self, tick_type: TickType | str, query_params: QueryParams = None
    ) -> dict[int, str]:
        """Map condition codes to names for trades or quotes.

        Args:
            tick_type: ``TickType.TRADES``/``TickType.QUOTES`` or their string values
            query_params: Optional query parameters

        Raises:
            ValueError: If ``tick_type`` is not a known tick type
        """
        return self.fetch("stock_equities_condition_mappings", query_params, tick_type=TickType(tick_type))

    def stock_equities_historic_trades(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> StockEquitiesHistoricTradesResponse:
        """Most recent trade for a ticker (``/v2/last/trade/{stocks_ticker}``)."""
        return self.fetch("stock_equities_historic_trades", query_params, stocks_ticker=stocks_ticker)

    def stock_equities_last_quote_for_a_symbol(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> StockEquitiesLastQuoteForASymbolResponse:
        """Most recent NBBO quote for a ticker (``/v2/last/nbbo/{stocks_ticker}``)."""
        return self.fetch("stock_equities_last_quote_for_a_symbol", query_params, stocks_ticker=stocks_ticker)

    def stock_equities_daily_open_close(
        self, stocks_ticker: str, date: DateLike, query_params: QueryParams = None
    ) -> StockEquitiesDailyOpenCloseResponse:
        return self.fetch("stock_equities_daily_open_close", query_params, stocks_ticker=stocks_ticker, date=date)

    def stock_equities_aggregates(
        self,
        stocks_ticker: str,
        multiplier: int,
        timespan: TimespanLike,
        from_: DateLike | int,
        to: DateLike | int,
        query_params: QueryParams = None,
    ) -> StockEquitiesAggregatesResponse:
        """Aggregate bars for a stock over a date range.

        Args:
            stocks_ticker: Ticker symbol, e.g. ``AAPL``
            multiplier: Size of the timespan multiplier
            timespan: Bar size (``Timespan`` or its string value)
            from_: Start of the window (``YYYY-MM-DD``, date or millisecond timestamp)
            to: End of the window (same forms as ``from_``)
            query_params: Optional query parameters (``adjusted``, ``sort``, ``limit``)

        Returns:
            StockEquitiesAggregatesResponse
        """
        return self.fetch(
            "stock_equities_aggregates",
            query_params,
            stocks_ticker=stocks_ticker,
            multiplier=multiplier,
            timespan=Timespan(timespan),
            from_=from_,
            to=to,
        )

    def stock_equities_grouped_daily(
        self, locale: str, market: str, date: DateLike, query_params: QueryParams = None
    ) -> StockEquitiesGroupedDailyResponse:
        return self.fetch("stock_equities_grouped_daily", query_params, locale=locale, market=market, date=date)

    def stock_equities_previous_close(
        self, stocks_ticker: str, query_params: QueryParams = None
    ) -> StockEquitiesPreviousCloseResponse:
        return self.fetch("stock_equities_previous_close", query_params, stocks_ticker=stocks_ticker)

    def stock_equities_snapshot_all_tickers(
        self, locale: str = DEFAULT_LOCALE, query_params: QueryParams = None
    ) -> StockEquitiesSnapshotAllTickersResponse:
        return self.fetch("stock_equities_snapshot_all_tickers", query_params, locale=locale)

    def stock_equities_snapshot_single_ticker(
        self, ticker: str, locale: str = DEFAULT_LOCALE, query_params: QueryParams = None
    ) -> StockEquitiesSnapshotSingleTickerResponse:
        return self.fetch("stock_equities_snapshot_single_ticker", query_params, locale=locale, ticker=ticker)

    def stock_equities_snapshot_gainers_losers(
        self,
        direction: SnapshotDirection | str,
        locale: str = DEFAULT_LOCALE,
        query_params: QueryParams = None,
    ) -> StockEquitiesSnapshotGainersLosersResponse:
        return self.fetch(
            "stock_equities_snapshot_gainers_losers",
            query_params,
            locale=locale,
            direction=SnapshotDirection(direction),
        )

    # Forex

    def forex_currencies_aggregates(
        self,
        forex_ticker: str,
        multiplier: int,
        timespan: TimespanLike,
        from_: DateLike | int,
        to: DateLike | int,
        query_params: QueryParams = None,
    ) -> ForexCurrenciesAggregatesResponse:
        """Aggregate bars for a currency pair such as ``C:EURUSD``."""
        return self.fetch(
            "forex_currencies_aggregates",
            query_params,
            forex_ticker=forex_ticker,
            multiplier=multiplier,
            timespan=Timespan(timespan),
            from_=from_,
            to=to,
        )

    def forex_currencies_grouped_daily(
        self, date: DateLike, query_params: QueryParams = None
    ) -> ForexCurrenciesGroupedDailyResponse:
        return self.fetch("forex_currencies_grouped_daily", query_params, date=date)

    def forex_currencies_previous_close(
        self, forex_ticker: str, query_params: QueryParams = None
    ) -> ForexCurrenciesPreviousCloseResponse:
        return self.fetch("forex_currencies_previous_close", query_params, forex_ticker=forex_ticker)

    # Crypto

    def crypto_crypto_exchanges(self, query_params: QueryParams = None) -> list[CryptoExchange]:
        return self.fetch("crypto_crypto_exchanges", query_params)

    def crypto_daily_open_close(
        self, from_: str, to: str, date: DateLike, query_params: QueryParams = None
    ) -> CryptoDailyOpenCloseResponse:
        """Open and close for a crypto pair on one day.

        Args:
            from_: Base currency, e.g. ``BTC``
            to: Quote currency, e.g. ``USD``
            date: Day as ``YYYY-MM-DD`` or a date
            query_params: Optional query parameters
        """
        return self.fetch("crypto_daily_open_close", query_params, from_=from_, to=to, date=date)

    def crypto_aggregates(
        self,
        crypto_ticker: str,
        multiplier: int,
        timespan: TimespanLike,
        from_: DateLike | int,
        to: DateLike | int,
        query_params: QueryParams = None,
    ) -> CryptoAggregatesResponse:
        """Aggregate bars for a crypto pair such as ``X:BTCUSD``."""
        return self.fetch(
            "crypto_aggregates",
            query_params,
            crypto_ticker=crypto_ticker,
            multiplier=multiplier,
            timespan=Timespan(timespan),
            from_=from_,
            to=to,
        )

    def crypto_grouped_daily(self, date: DateLike, query_params: QueryParams = None) -> CryptoGroupedDailyResponse:
        return self.fetch("crypto_grouped_daily", query_params, date=date)

    def crypto_previous_close(
        self, crypto_ticker: str, query_params: QueryParams = None
    ) -> CryptoPreviousCloseResponse:
        return self.fetch("crypto_previous_close", query_params, crypto_ticker=crypto_ticker)
