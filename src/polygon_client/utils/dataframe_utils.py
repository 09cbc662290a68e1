#!/usr/bin/env python
"""DataFrame helpers for aggregate bars.

Stock, forex and crypto aggregate models share the same OHLCV attributes, so a
single conversion covers every ``*AggregatesResponse.results`` list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

import pandas as pd

from polygon_client.utils.loguru_setup import logger

__all__ = [
    "AGGREGATE_COLUMNS",
    "INDEX_NAME",
    "aggregates_to_dataframe",
    "create_empty_dataframe",
]

INDEX_NAME = "timestamp"
AGGREGATE_COLUMNS = ["open", "high", "low", "close", "volume", "vwap", "transactions"]


class AggregateBar(Protocol):
    open: float
    high: float
    low: float
    close: float
    volume: float
    vwap: float | None
    transactions: int | None
    timestamp: int | None


def create_empty_dataframe() -> pd.DataFrame:
    """Create an empty DataFrame with the aggregate column layout.

    Returns:
        Empty DataFrame with a UTC ``timestamp`` index
    """
    df = pd.DataFrame(columns=AGGREGATE_COLUMNS, index=pd.DatetimeIndex([], tz="UTC", name=INDEX_NAME))
    return df


def aggregates_to_dataframe(bars: Iterable[AggregateBar]) -> pd.DataFrame:
    """Convert aggregate bars into a time-indexed DataFrame.

    Bars without a timestamp cannot be placed on the index and are skipped.

    Args:
        bars: Aggregate bars (stock, forex or crypto)

    Returns:
        DataFrame indexed by UTC ``timestamp`` with OHLCV, vwap and transaction
        columns, sorted by time
    """
    records = []
    for bar in bars:
        if bar.timestamp is None:
            logger.warning(f"Skipping aggregate bar without timestamp: {bar!r}")
            continue
        records.append(
            {
                INDEX_NAME: pd.Timestamp(bar.timestamp, unit="ms", tz="UTC"),
                "open": bar.open,
                "high": bar.high,
                "low": bar.low,
                "close": bar.close,
                "volume": bar.volume,
                "vwap": bar.vwap,
                "transactions": bar.transactions,
            }
        )

    if not records:
        return create_empty_dataframe()

    df = pd.DataFrame(records).set_index(INDEX_NAME)
    return df[AGGREGATE_COLUMNS].sort_index()
