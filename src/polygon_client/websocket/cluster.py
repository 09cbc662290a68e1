#!/usr/bin/env python
"""Streaming clusters.

A cluster is the path segment after the WebSocket host
(``wss://socket.polygon.io/stocks``). Only the three clusters below exist;
names are validated here, before any network I/O.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "CRYPTO_CLUSTER",
    "FOREX_CLUSTER",
    "STOCKS_CLUSTER",
    "Cluster",
]

STOCKS_CLUSTER = "stocks"
FOREX_CLUSTER = "forex"
CRYPTO_CLUSTER = "crypto"


class Cluster(str, Enum):
    """Closed set of streaming clusters."""

    STOCKS = STOCKS_CLUSTER
    FOREX = FOREX_CLUSTER
    CRYPTO = CRYPTO_CLUSTER

    @classmethod
    def from_string(cls, value: Cluster | str) -> Cluster:
        """Parse a cluster name case-insensitively.

        Args:
            value: A Cluster member or one of ``stocks``, ``forex``, ``crypto``

        Returns:
            Cluster member

        Raises:
            ValueError: If the name is not a known cluster
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid cluster: {value!r}. Must be one of: {valid}")

    def url(self, host: str) -> str:
        """Full WebSocket URL for this cluster on ``host``."""
        return f"{host.rstrip('/')}/{self.value}"
