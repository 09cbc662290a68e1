#!/usr/bin/env python3
"""Unit tests for the REST client.

Tests:
- Request construction (URL, bearer header, query string)
- Response decoding into typed results
- Error mapping (HTTP status, timeouts, network failures, bad bodies)
- Credential resolution and client lifecycle

Requests are served by an httpx.MockTransport; nothing leaves the process.
"""

import datetime

import httpx
import pytest

from polygon_client.rest.client import RESTClient
from polygon_client.types import (
    ReferenceStockDividendsResponse,
    StockEquitiesAggregatesResponse,
    Timespan,
)
from polygon_client.utils.exceptions import (
    DecodeError,
    HTTPError,
    MissingCredentialError,
    NetworkError,
    RestTimeoutError,
)

PREVIOUS_CLOSE = {
    "ticker": "AAPL",
    "adjusted": True,
    "queryCount": 1,
    "resultsCount": 1,
    "status": "OK",
    "results": [
        {"T": "AAPL", "v": 131704427, "vw": 116.3058, "o": 115.55, "c": 115.97, "h": 117.59, "l": 114.13, "t": 1605042000000}
    ],
}

AGGREGATES = {
    "ticker": "AAPL",
    "adjusted": True,
    "queryCount": 1,
    "request_id": "req-1",
    "resultsCount": 1,
    "status": "OK",
    "results": [{"v": 70790813, "vw": 131.6292, "o": 133.52, "c": 132.05, "h": 133.6116, "l": 126.76, "t": 1609736400000}],
}

DIVIDENDS = {
    "status": "OK",
    "results": [
        {
            "cash_amount": 0.24,
            "currency": "USD",
            "declaration_date": "2023-05-04",
            "dividend_type": "CD",
            "ex_dividend_date": "2023-05-12",
            "frequency": 4,
            "pay_date": "2023-05-18",
            "record_date": "2023-05-15",
            "ticker": "AAPL",
        }
    ],
}


def _json_handler(payload, status_code=200):
    def handler(request):
        return httpx.Response(status_code, json=payload)

    return handler


class TestRequestConstruction:
    """URL, headers and query parameters."""

    def test_bearer_header_and_url(self, make_rest_client):
        client = make_rest_client(_json_handler(PREVIOUS_CLOSE))

        response = client.stock_equities_previous_close("AAPL")

        request = client.requests[0]
        assert request.method == "GET"
        assert str(request.url) == f"{client.config.api_url}/v2/aggs/ticker/AAPL/prev"
        assert request.headers["Authorization"] == f"Bearer {client.config.auth_key}"
        assert response.results[0].close == 115.97

    def test_query_params_passed_through(self, make_rest_client):
        client = make_rest_client(_json_handler(AGGREGATES))

        response = client.stock_equities_aggregates(
            "AAPL", 1, "day", "2021-01-04", "2021-01-04", {"adjusted": True, "sort": "asc", "limit": 120, "x": None}
        )

        request = client.requests[0]
        assert request.url.path == "/v2/aggs/ticker/AAPL/range/1/day/2021-01-04/2021-01-04"
        assert dict(request.url.params) == {"adjusted": "true", "sort": "asc", "limit": "120"}
        assert isinstance(response, StockEquitiesAggregatesResponse)
        assert response.request_id == "req-1"

    def test_key_not_in_query_string(self, make_rest_client):
        """The credential travels only in the Authorization header."""
        client = make_rest_client(_json_handler(PREVIOUS_CLOSE))
        client.stock_equities_previous_close("AAPL")
        assert client.config.auth_key not in str(client.requests[0].url)

    def test_dividends_ticker_in_query(self, make_rest_client):
        client = make_rest_client(_json_handler(DIVIDENDS))

        response = client.reference_stock_dividends("AAPL", {"limit": 5})

        request = client.requests[0]
        assert request.url.path == "/v3/reference/dividends"
        assert request.url.params["ticker"] == "AAPL"
        assert request.url.params["limit"] == "5"
        assert isinstance(response, ReferenceStockDividendsResponse)

    def test_crypto_ticker_colon_preserved(self, make_rest_client):
        payload = dict(PREVIOUS_CLOSE, ticker="X:BTCUSD")
        client = make_rest_client(_json_handler(payload))
        client.crypto_previous_close("X:BTCUSD")
        assert client.requests[0].url.raw_path == b"/v2/aggs/ticker/X:BTCUSD/prev"

    def test_timespan_string_coerced(self, make_rest_client):
        client = make_rest_client(_json_handler(AGGREGATES))
        client.forex_currencies_aggregates("C:EURUSD", 5, Timespan.MINUTE, datetime.date(2021, 1, 4), "2021-01-05")
        assert client.requests[0].url.path == "/v2/aggs/ticker/C:EURUSD/range/5/minute/2021-01-04/2021-01-05"

    def test_invalid_timespan_rejected_before_request(self, make_rest_client):
        client = make_rest_client(_json_handler(AGGREGATES))
        with pytest.raises(ValueError):
            client.crypto_aggregates("X:BTCUSD", 1, "fortnight", "2021-01-01", "2021-01-02")
        assert client.requests == []

    def test_snapshot_locale_default(self, make_rest_client):
        client = make_rest_client(_json_handler({"status": "OK", "tickers": []}))
        client.stock_equities_snapshot_gainers_losers("gainers")
        assert client.requests[0].url.path == "/v2/snapshot/locale/us/markets/stocks/gainers"


class TestResponseDecoding:
    """List and mapping responses."""

    def test_condition_mappings(self, make_rest_client):
        client = make_rest_client(_json_handler({"1": "Acquisition", "2": "Average Price Trade"}))

        mappings = client.stock_equities_condition_mappings("trades")

        assert client.requests[0].url.path == "/v1/meta/conditions/trades"
        assert mappings == {1: "Acquisition", 2: "Average Price Trade"}

    def test_market_holidays(self, make_rest_client):
        payload = [{"exchange": "NYSE", "name": "Christmas", "date": "2020-12-25", "status": "closed"}]
        client = make_rest_client(_json_handler(payload))

        holidays = client.reference_market_holidays()

        assert len(holidays) == 1
        assert holidays[0].name == "Christmas"

    def test_generic_fetch(self, make_rest_client):
        client = make_rest_client(_json_handler(PREVIOUS_CLOSE))
        response = client.fetch("stock_equities_previous_close", stocks_ticker="AAPL")
        assert response.ticker == "AAPL"


class TestErrorMapping:
    """Failures surface as typed errors."""

    def test_http_error_carries_status_and_body(self, make_rest_client):
        client = make_rest_client(_json_handler({"status": "NOT_FOUND", "message": "Ticker not found"}, 404))

        with pytest.raises(HTTPError) as exc_info:
            client.stock_equities_previous_close("NOPE")

        assert exc_info.value.status_code == 404
        assert "Ticker not found" in exc_info.value.body
        assert exc_info.value.url.endswith("/v2/aggs/ticker/NOPE/prev")

    def test_rate_limited(self, make_rest_client):
        client = make_rest_client(lambda request: httpx.Response(429, text="Too Many Requests"))
        with pytest.raises(HTTPError) as exc_info:
            client.reference_markets()
        assert exc_info.value.status_code == 429

    def test_error_body_truncated(self, make_rest_client):
        client = make_rest_client(lambda request: httpx.Response(500, text="x" * 5000))
        with pytest.raises(HTTPError) as exc_info:
            client.reference_locales()
        assert len(exc_info.value.body) == 200

    def test_non_200_success_accepted(self, make_rest_client):
        """Any 2xx status is a success."""
        client = make_rest_client(_json_handler({"status": "OK", "results": []}, 201))
        assert client.reference_markets().results == []

    def test_non_json_body(self, make_rest_client):
        client = make_rest_client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
        with pytest.raises(DecodeError) as exc_info:
            client.reference_markets()
        assert "maintenance" in exc_info.value.payload_preview

    def test_shape_mismatch(self, make_rest_client):
        client = make_rest_client(_json_handler({"status": "OK"}))
        with pytest.raises(DecodeError):
            client.stock_equities_previous_close("AAPL")

    def test_timeout(self, make_rest_client):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        client = make_rest_client(handler)
        with pytest.raises(RestTimeoutError):
            client.reference_markets()

    def test_timeout_is_network_error(self, make_rest_client):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_rest_client(handler)
        with pytest.raises(NetworkError):
            client.reference_markets()

    def test_connect_error(self, make_rest_client):
        def handler(request):
            raise httpx.ConnectError("name resolution failed", request=request)

        client = make_rest_client(handler)
        with pytest.raises(NetworkError) as exc_info:
            client.reference_markets()
        assert not isinstance(exc_info.value, RestTimeoutError)


class TestConfigurationAndLifecycle:
    """Credential resolution and resource handling."""

    def test_missing_credential(self):
        with pytest.raises(MissingCredentialError):
            RESTClient()

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.setenv("POLYGON_AUTH_KEY", "env-key")
        monkeypatch.setenv("POLYGON_API_URL", "https://staging.example.com/")
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"status": "OK", "results": []})

        with RESTClient(client=httpx.Client(transport=httpx.MockTransport(handler))) as client:
            client.reference_markets()

        assert str(seen[0].url) == "https://staging.example.com/v2/reference/markets"
        assert seen[0].headers["Authorization"] == "Bearer env-key"

    def test_explicit_key_wins(self, monkeypatch):
        monkeypatch.setenv("POLYGON_AUTH_KEY", "env-key")
        client = RESTClient("explicit-key", timeout=5)
        assert client.config.auth_key == "explicit-key"
        assert client.config.timeout == 5

    def test_repr_hides_key(self):
        client = RESTClient("secret-key")
        assert "secret-key" not in repr(client)
        assert "secret-key" not in repr(client.config)

    def test_lazy_client_creation(self):
        client = RESTClient("k")
        assert client._client is None
        with client:
            assert isinstance(client._client, httpx.Client)
        assert client._client is None

    def test_close_is_idempotent(self):
        client = RESTClient("k")
        client.close()
        client.close()
