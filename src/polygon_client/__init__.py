"""polygon-client - Typed client for the polygon.io market data API.

This package provides two entry points:

- ``RESTClient``: synchronous access to reference data, stock/forex/crypto
  aggregates, snapshots and financial statements, decoded into pydantic models.
- ``WebSocketClient``: an asyncio streaming session on the ``stocks``,
  ``forex`` or ``crypto`` cluster.

Quick Start:
    >>> from polygon_client import RESTClient
    >>> with RESTClient("my-key") as client:
    ...     bars = client.stock_equities_aggregates("AAPL", 1, "day", "2024-01-02", "2024-01-31")
    ...     print(len(bars.results))

    >>> import asyncio
    >>> from polygon_client import WebSocketClient
    >>> async def main():
    ...     async with await WebSocketClient.connect("stocks", "my-key") as session:
    ...         await session.subscribe(["T.MSFT"])
    ...         print(await session.receive(timeout=5))
    >>> asyncio.run(main())

The API key can also be supplied through the ``POLYGON_AUTH_KEY`` environment
variable, and the REST base URL through ``POLYGON_API_URL``.
"""

__version__ = "0.1.0"


# Lazy imports keep "import polygon_client" cheap for CLI startup
def __getattr__(name):
    """Lazy import for main package exports."""
    if name == "RESTClient":
        from .rest.client import RESTClient

        return RESTClient
    if name in ("WebSocketClient", "SessionState"):
        from .websocket import client as _ws_client

        return getattr(_ws_client, name)
    if name == "Cluster":
        from .websocket.cluster import Cluster

        return Cluster
    if name == "ClientConfig":
        from .utils.config import ClientConfig

        return ClientConfig
    if name == "aggregates_to_dataframe":
        from .utils.dataframe_utils import aggregates_to_dataframe

        return aggregates_to_dataframe
    if name in _EXCEPTION_NAMES:
        from .utils import exceptions as _exceptions

        return getattr(_exceptions, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


_EXCEPTION_NAMES = (
    "AuthenticationError",
    "ConfigurationError",
    "ConnectionClosedError",
    "DecodeError",
    "HTTPError",
    "InvalidEndpointError",
    "MissingCredentialError",
    "NetworkError",
    "PolygonError",
    "ReceiveTimeoutError",
    "RestAPIError",
    "RestTimeoutError",
    "SessionStateError",
    "TransportError",
    "WebSocketConnectError",
    "WebSocketError",
)

__all__ = [
    "AuthenticationError",
    "ClientConfig",
    "Cluster",
    "ConfigurationError",
    "ConnectionClosedError",
    "DecodeError",
    "HTTPError",
    "InvalidEndpointError",
    "MissingCredentialError",
    "NetworkError",
    "PolygonError",
    "RESTClient",
    "ReceiveTimeoutError",
    "RestAPIError",
    "RestTimeoutError",
    "SessionState",
    "SessionStateError",
    "TransportError",
    "WebSocketClient",
    "WebSocketConnectError",
    "WebSocketError",
    "aggregates_to_dataframe",
]
