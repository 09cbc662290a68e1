"""Streaming access to the polygon.io WebSocket clusters."""

from .client import SessionState, WebSocketClient
from .cluster import CRYPTO_CLUSTER, FOREX_CLUSTER, STOCKS_CLUSTER, Cluster
from .messages import build_auth_message, build_subscribe_message, build_unsubscribe_message, decode_frame

__all__ = [
    "CRYPTO_CLUSTER",
    "FOREX_CLUSTER",
    "STOCKS_CLUSTER",
    "Cluster",
    "SessionState",
    "WebSocketClient",
    "build_auth_message",
    "build_subscribe_message",
    "build_unsubscribe_message",
    "decode_frame",
]
