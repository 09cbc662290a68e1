#!/usr/bin/env python3
"""Tests for the polygon-client command line interface."""

import datetime

import pendulum
import pytest
from typer.testing import CliRunner

from polygon_client.cli import app, compute_dividend_yield
from polygon_client.rest.client import RESTClient
from polygon_client.types import (
    ReferenceStockDividendsResponse,
    ReferenceStockDividendsResult,
    StockEquitiesPreviousCloseResponse,
    decode_response,
)
from polygon_client.utils.exceptions import HTTPError, PolygonError

runner = CliRunner()


def _dividend(ex_date, amount=0.25, ticker="AAPL"):
    return ReferenceStockDividendsResult(
        cash_amount=amount,
        currency="USD",
        declaration_date=ex_date,
        dividend_type="CD",
        ex_dividend_date=ex_date,
        frequency=4,
        pay_date=ex_date,
        record_date=ex_date,
        ticker=ticker,
    )


def _previous_close(ticker, close):
    return decode_response(
        StockEquitiesPreviousCloseResponse,
        {
            "ticker": ticker,
            "adjusted": True,
            "queryCount": 1,
            "resultsCount": 1,
            "status": "OK",
            "results": [{"T": ticker, "o": close, "h": close, "l": close, "c": close, "v": 1000}],
        },
    )


class TestComputeDividendYield:
    """Trailing-window arithmetic."""

    TODAY = datetime.date(2024, 6, 30)

    def test_sums_dividends_inside_window(self):
        dividends = [_dividend("2024-05-10"), _dividend("2024-02-09"), _dividend("2023-11-10"), _dividend("2023-08-11")]
        result = compute_dividend_yield("AAPL", dividends, 100.0, self.TODAY)
        assert result.dividend_count == 4
        assert result.dividend_sum == pytest.approx(1.0)
        assert result.percent == pytest.approx(1.0)

    def test_window_boundaries(self):
        """The window excludes its start day and includes today."""
        dividends = [
            _dividend("2023-07-01"),  # exactly 365 days back
            _dividend("2023-07-02"),
            _dividend("2024-06-30"),
            _dividend("2024-07-01"),  # announced, not yet ex
        ]
        result = compute_dividend_yield("AAPL", dividends, 50.0, self.TODAY)
        assert result.dividend_count == 2
        assert result.dividend_sum == pytest.approx(0.5)

    def test_no_dividends(self):
        result = compute_dividend_yield("AMZN", [], 180.0, self.TODAY)
        assert result.dividend_count == 0
        assert result.percent == 0

    def test_non_positive_close(self):
        with pytest.raises(PolygonError, match="not positive"):
            compute_dividend_yield("AAPL", [_dividend("2024-05-10")], 0.0, self.TODAY)

    @pytest.mark.parametrize("ex_date", ["2024-02-30", "soon", "P1D"])
    def test_unparseable_ex_dividend_date(self, ex_date):
        """Dates that carry no calendar day raise PolygonError, not a parser error."""
        dividends = [_dividend("2024-05-10"), _dividend(ex_date)]
        with pytest.raises(PolygonError, match="Invalid ex-dividend date for AAPL"):
            compute_dividend_yield("AAPL", dividends, 100.0, self.TODAY)


class TestDividendYieldCommand:
    """The dividend-yield command against patched REST calls."""

    @pytest.fixture
    def patched_rest(self, monkeypatch):
        today = pendulum.today("UTC")
        recent = today.subtract(days=30).to_date_string()
        closes = {"AAPL": 200.0, "MSFT": 400.0, "ODD": 50.0}

        def fake_dividends(self, stocks_ticker, query_params=None):
            if stocks_ticker not in closes:
                raise HTTPError(404, url=f"https://api.polygon.io/v3/reference/dividends?ticker={stocks_ticker}")
            ex_date = "2024-13-45" if stocks_ticker == "ODD" else recent
            return ReferenceStockDividendsResponse(
                status="OK", results=[_dividend(ex_date, amount=1.0, ticker=stocks_ticker)]
            )

        def fake_previous_close(self, stocks_ticker, query_params=None):
            return _previous_close(stocks_ticker, closes[stocks_ticker])

        monkeypatch.setattr(RESTClient, "reference_stock_dividends", fake_dividends)
        monkeypatch.setattr(RESTClient, "stock_equities_previous_close", fake_previous_close)

    def test_table_output(self, patched_rest):
        result = runner.invoke(app, ["dividend-yield", "AAPL", "MSFT", "--auth-key", "k1"])

        assert result.exit_code == 0, result.output
        assert "AAPL" in result.output
        assert "0.50%" in result.output
        assert "0.25%" in result.output

    def test_failing_ticker_skipped(self, patched_rest):
        result = runner.invoke(app, ["dividend-yield", "AAPL", "NOPE", "--auth-key", "k1"])

        assert result.exit_code == 0, result.output
        assert "Skipping NOPE" in result.output
        assert "0.50%" in result.output

    def test_bad_ex_dividend_date_skips_only_that_ticker(self, patched_rest):
        result = runner.invoke(app, ["dividend-yield", "ODD", "MSFT", "--auth-key", "k1"])

        assert result.exit_code == 0, result.output
        assert "Skipping ODD" in result.output
        assert "0.25%" in result.output

    def test_all_tickers_fail(self, patched_rest):
        result = runner.invoke(app, ["dividend-yield", "NOPE", "--auth-key", "k1"])
        assert result.exit_code == 1

    def test_missing_credential(self):
        result = runner.invoke(app, ["dividend-yield", "AAPL"])
        assert result.exit_code == 1
        assert "POLYGON_AUTH_KEY" in result.output

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "dividend-yield", "AAPL"])
        assert result.exit_code == 2


class TestStreamCommand:
    """The stream command with a fake connector in place of websockets.connect."""

    @pytest.fixture
    def patched_connector(self, monkeypatch, fake_connector):
        monkeypatch.setattr("polygon_client.websocket.client._default_connector", fake_connector)
        return fake_connector

    def test_prints_frames_until_limit(self, patched_connector, fake_socket):
        fake_socket.feed('[{"ev":"T","sym":"MSFT","p":114.12}]')
        fake_socket.feed('[{"ev":"T","sym":"MSFT","p":114.13}]')

        result = runner.invoke(app, ["stream", "stocks", "T.MSFT", "--auth-key", "k1", "--limit", "2"])

        assert result.exit_code == 0, result.output
        assert '"p":114.13' in result.output
        assert "Received 2 frame(s)" in result.output
        assert patched_connector.urls == ["wss://socket.polygon.io/stocks"]
        assert fake_socket.sent == [
            '{"action":"auth","params":"k1"}',
            '{"action":"subscribe","params":"T.MSFT"}',
        ]
        assert fake_socket.closed

    def test_stops_on_remote_close(self, patched_connector, fake_socket):
        fake_socket.feed('[{"ev":"XT","pair":"BTC-USD"}]')
        fake_socket.remote_close()

        result = runner.invoke(app, ["stream", "crypto", "XT.*", "--auth-key", "k1"])

        assert result.exit_code == 0, result.output
        assert "Received 1 frame(s)" in result.output

    def test_connect_failure(self, patched_connector):
        patched_connector.error = OSError("Name or service not known")
        result = runner.invoke(app, ["stream", "forex", "C.EUR/USD", "--auth-key", "k1"])
        assert result.exit_code == 1

    def test_invalid_cluster(self, patched_connector):
        result = runner.invoke(app, ["stream", "options", "T.MSFT", "--auth-key", "k1"])
        assert result.exit_code == 2
        assert patched_connector.urls == []
