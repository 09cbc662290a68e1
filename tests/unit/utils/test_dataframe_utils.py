"""Tests for aggregates_to_dataframe."""

import pandas as pd

from polygon_client.types import CryptoAggregates, ForexCurrenciesAggregates, StockEquitiesAggregates
from polygon_client.utils.dataframe_utils import AGGREGATE_COLUMNS, INDEX_NAME, aggregates_to_dataframe

# 2024-01-02 and 2024-01-03 00:00 UTC in milliseconds
DAY_1_MS = 1704153600000
DAY_2_MS = 1704240000000


def _stock_bar(timestamp, close):
    return StockEquitiesAggregates(o=1.0, h=2.0, l=0.5, c=close, v=100.0, vw=1.2, n=7, t=timestamp)


class TestAggregatesToDataFrame:
    """Conversion of aggregate bars into a time-indexed DataFrame."""

    def test_columns_and_index(self):
        df = aggregates_to_dataframe([_stock_bar(DAY_1_MS, 1.5)])

        assert list(df.columns) == AGGREGATE_COLUMNS
        assert df.index.name == INDEX_NAME
        assert isinstance(df.index, pd.DatetimeIndex)
        assert str(df.index.tz) == "UTC"
        assert df.index[0] == pd.Timestamp("2024-01-02", tz="UTC")

    def test_values(self):
        row = aggregates_to_dataframe([_stock_bar(DAY_1_MS, 1.5)]).iloc[0]
        assert row["open"] == 1.0
        assert row["high"] == 2.0
        assert row["low"] == 0.5
        assert row["close"] == 1.5
        assert row["volume"] == 100.0
        assert row["vwap"] == 1.2
        assert row["transactions"] == 7

    def test_sorted_by_time(self):
        """Out-of-order bars should come back sorted."""
        df = aggregates_to_dataframe([_stock_bar(DAY_2_MS, 2.0), _stock_bar(DAY_1_MS, 1.0)])
        assert df.index.is_monotonic_increasing
        assert df["close"].tolist() == [1.0, 2.0]

    def test_empty_input(self):
        """No bars should give an empty frame with the standard layout."""
        df = aggregates_to_dataframe([])
        assert df.empty
        assert list(df.columns) == AGGREGATE_COLUMNS
        assert df.index.name == INDEX_NAME

    def test_bars_without_timestamp_skipped(self):
        bars = [StockEquitiesAggregates(o=1, h=1, l=1, c=1, v=1), _stock_bar(DAY_1_MS, 3.0)]
        df = aggregates_to_dataframe(bars)
        assert len(df) == 1
        assert df["close"].iloc[0] == 3.0

    def test_forex_and_crypto_bars(self):
        """Forex and crypto bars share the same attributes and convert identically."""
        forex = ForexCurrenciesAggregates(o=1.1, h=1.2, l=1.0, c=1.15, v=10, t=DAY_1_MS)
        crypto = CryptoAggregates(o=40000, h=41000, l=39000, c=40500, v=3.5, t=DAY_2_MS, vw=40200.0)

        df = aggregates_to_dataframe([forex, crypto])
        assert len(df) == 2
        assert df["close"].tolist() == [1.15, 40500]
        assert pd.isna(df["vwap"].iloc[0])
