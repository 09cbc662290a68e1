#!/usr/bin/env python
"""Enumerations used in request paths and response payloads.

Each enum carries the exact string the API uses as its value, so path
segments are built from ``.value`` rather than from the member name.
"""

from enum import Enum

__all__ = [
    "DividendType",
    "SnapshotDirection",
    "TickType",
    "Timespan",
]


class TickType(str, Enum):
    """Tick types accepted by the condition mappings endpoint."""

    TRADES = "trades"
    QUOTES = "quotes"


class DividendType(str, Enum):
    """Dividend classification reported by the v3 dividends endpoint."""

    CD = "CD"  # Consistent dividends paid on schedule
    SC = "SC"  # Special cash dividends
    LT = "LT"  # Long-term capital gain distributions
    ST = "ST"  # Short-term capital gain distributions


class SnapshotDirection(str, Enum):
    """Direction for the gainers/losers snapshot."""

    GAINERS = "gainers"
    LOSERS = "losers"


class Timespan(str, Enum):
    """Size of the time window for aggregate bars."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
