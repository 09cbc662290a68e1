"""Tests for the REST endpoint table and path formatting."""

import datetime

import pytest

from polygon_client.rest.endpoints import ENDPOINTS, get_endpoint, normalize_query_params, path_value
from polygon_client.rest.client import RESTClient
from polygon_client.types import SnapshotDirection, TickType, Timespan

EXPECTED_ENDPOINTS = {
    "reference_tickers",
    "reference_ticker_types",
    "reference_ticker_details",
    "reference_ticker_details_vx",
    "reference_ticker_news",
    "reference_markets",
    "reference_locales",
    "reference_stock_splits",
    "reference_stock_dividends",
    "reference_stock_financials",
    "reference_stock_financials_vx",
    "reference_market_holidays",
    "reference_market_status",
    "stock_equities_exchanges",
    "stock_equities_condition_mappings",
    "stock_equities_historic_trades",
    "stock_equities_last_quote_for_a_symbol",
    "stock_equities_daily_open_close",
    "stock_equities_aggregates",
    "stock_equities_grouped_daily",
    "stock_equities_previous_close",
    "stock_equities_snapshot_all_tickers",
    "stock_equities_snapshot_single_ticker",
    "stock_equities_snapshot_gainers_losers",
    "forex_currencies_aggregates",
    "forex_currencies_grouped_daily",
    "forex_currencies_previous_close",
    "crypto_crypto_exchanges",
    "crypto_daily_open_close",
    "crypto_aggregates",
    "crypto_grouped_daily",
    "crypto_previous_close",
}


class TestEndpointTable:
    """The table covers every REST operation exactly once."""

    def test_all_endpoints_present(self):
        assert set(ENDPOINTS) == EXPECTED_ENDPOINTS

    @pytest.mark.parametrize("name", sorted(EXPECTED_ENDPOINTS))
    def test_client_method_exists(self, name):
        """Each endpoint has a RESTClient method of the same name."""
        assert callable(getattr(RESTClient, name))

    @pytest.mark.parametrize("name", sorted(EXPECTED_ENDPOINTS))
    def test_paths_are_versioned(self, name):
        path = ENDPOINTS[name].path
        assert path.startswith(("/v1/", "/v2/", "/v3/", "/vX/"))

    def test_unknown_endpoint(self):
        with pytest.raises(KeyError, match="Unknown endpoint"):
            get_endpoint("stock_equities_everything")


class TestFormatPath:
    """Placeholder substitution and quoting."""

    def test_aggregates_path(self):
        path = get_endpoint("stock_equities_aggregates").format_path(
            stocks_ticker="AAPL",
            multiplier=1,
            timespan=Timespan.DAY,
            from_="2021-01-01",
            to="2021-01-31",
        )
        assert path == "/v2/aggs/ticker/AAPL/range/1/day/2021-01-01/2021-01-31"

    def test_path_params_in_order(self):
        assert get_endpoint("crypto_daily_open_close").path_params == ("from_", "to", "date")
        assert get_endpoint("reference_markets").path_params == ()

    def test_colon_kept_in_ticker(self):
        """Forex and crypto tickers keep their market prefix."""
        path = get_endpoint("crypto_previous_close").format_path(crypto_ticker="X:BTCUSD")
        assert path == "/v2/aggs/ticker/X:BTCUSD/prev"

    def test_reserved_characters_quoted(self):
        path = get_endpoint("stock_equities_previous_close").format_path(stocks_ticker="BRK/A B")
        assert path == "/v2/aggs/ticker/BRK%2FA%20B/prev"

    def test_enum_values_used(self):
        endpoint = get_endpoint("stock_equities_condition_mappings")
        assert endpoint.format_path(tick_type=TickType.QUOTES) == "/v1/meta/conditions/quotes"

        endpoint = get_endpoint("stock_equities_snapshot_gainers_losers")
        path = endpoint.format_path(locale="us", direction=SnapshotDirection.LOSERS)
        assert path == "/v2/snapshot/locale/us/markets/stocks/losers"

    def test_date_objects(self):
        path = get_endpoint("forex_currencies_grouped_daily").format_path(date=datetime.date(2020, 10, 14))
        assert path == "/v2/aggs/grouped/locale/global/market/fx/2020-10-14"

    def test_missing_parameter(self):
        with pytest.raises(ValueError, match="missing path parameter"):
            get_endpoint("stock_equities_daily_open_close").format_path(stocks_ticker="AAPL")

    def test_unexpected_parameter(self):
        with pytest.raises(ValueError, match="unexpected path parameter"):
            get_endpoint("reference_markets").format_path(stocks_ticker="AAPL")


class TestQueryParams:
    """Rendering of query string values."""

    def test_none_values_dropped(self):
        assert normalize_query_params({"limit": 10, "cursor": None}) == {"limit": "10"}

    def test_empty(self):
        assert normalize_query_params(None) == {}
        assert normalize_query_params({}) == {}

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (Timespan.HOUR, "hour"),
            (datetime.date(2021, 3, 1), "2021-03-01"),
            (50, "50"),
            ("asc", "asc"),
        ],
    )
    def test_path_value(self, value, expected):
        assert path_value(value) == expected
