#!/usr/bin/env python
"""Streaming session over the polygon.io WebSocket feed.

A session follows a fixed lifecycle::

    DISCONNECTED -> CONNECTING -> AUTHENTICATING -> ACTIVE -> CLOSED

``connect`` performs the handshake and sends the auth frame. By default the
session becomes ACTIVE as soon as that frame is written; the server's
``auth_success``/``auth_failed`` reply arrives as an ordinary frame. With
``wait_for_auth=True`` the reply is awaited and a rejection raises
``AuthenticationError``.

The session does not reconnect. Once CLOSED, every operation fails and a new
session has to be created.

Example:
    >>> async with await WebSocketClient.connect("stocks", "my-key") as session:
    ...     await session.subscribe(["T.MSFT", "Q.AAPL"])
    ...     async for frame in session:
    ...         print(frame)
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Awaitable, Callable, Iterable
from enum import Enum
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed, InvalidHandshake, InvalidURI

from polygon_client.utils.config import ClientConfig
from polygon_client.utils.exceptions import (
    AuthenticationError,
    ConnectionClosedError,
    DecodeError,
    InvalidEndpointError,
    ReceiveTimeoutError,
    SessionStateError,
    TransportError,
    WebSocketConnectError,
)
from polygon_client.utils.loguru_setup import logger
from polygon_client.websocket.cluster import Cluster
from polygon_client.websocket.messages import (
    AuthStatus,
    auth_status,
    build_auth_message,
    build_subscribe_message,
    build_unsubscribe_message,
    decode_frame,
    normalize_patterns,
)

__all__ = [
    "Connector",
    "SessionState",
    "WebSocketClient",
]

# Opens a socket for a URL; the result must provide async send(), recv() and close()
Connector = Callable[..., Awaitable[Any]]


class SessionState(str, Enum):
    """Lifecycle state of a WebSocketClient."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    AUTHENTICATING = "authenticating"
    ACTIVE = "active"
    CLOSED = "closed"


async def _default_connector(url: str, open_timeout: float | None = None) -> Any:
    return await websockets.connect(url, open_timeout=open_timeout)


def _close_details(exc: ConnectionClosed) -> tuple[int | None, str]:
    """Close code and reason received from the peer, if a close frame arrived."""
    rcvd = getattr(exc, "rcvd", None)
    if rcvd is None:
        return None, ""
    return rcvd.code, rcvd.reason


class WebSocketClient:
    """One authenticated streaming session on a cluster.

    Use ``await WebSocketClient.connect(...)`` rather than the constructor; the
    constructor only prepares a DISCONNECTED session.

    Attributes:
        cluster: Cluster this session streams from
        config: Resolved client configuration
        url: Full WebSocket URL (``{ws_host}/{cluster}``)
    """

    def __init__(
        self,
        cluster: Cluster | str,
        config: ClientConfig,
        *,
        connector: Connector | None = None,
    ) -> None:
        self.cluster = Cluster.from_string(cluster)
        self.config = config
        self.url = self.cluster.url(config.ws_host)

        self._connector = connector if connector is not None else _default_connector
        self._socket: Any = None
        self._state = SessionState.DISCONNECTED
        self._send_lock = asyncio.Lock()
        # Frames read while awaiting the auth reply, handed out before new reads
        self._pending: deque[str | bytes] = deque()
        self._subscriptions: list[str] = []
        self._close_code: int | None = None
        self._close_reason = ""

    @classmethod
    async def connect(
        cls,
        cluster: Cluster | str,
        auth_key: str | None = None,
        *,
        config: ClientConfig | None = None,
        timeout: float | None = None,
        connector: Connector | None = None,
        wait_for_auth: bool = False,
    ) -> WebSocketClient:
        """Open a session and authenticate.

        Args:
            cluster: ``Cluster`` member or ``stocks``/``forex``/``crypto`` (any case)
            auth_key: API key. Falls back to ``POLYGON_AUTH_KEY``.
            config: Pre-resolved configuration; when given, ``auth_key`` is ignored
            timeout: Seconds allowed for the opening handshake (and for the auth
                reply when ``wait_for_auth`` is set). None waits indefinitely.
            connector: Coroutine function ``(url, open_timeout=...)`` returning
                a socket; defaults to ``websockets.connect``
            wait_for_auth: Wait for the server's auth status before returning

        Returns:
            An ACTIVE session

        Raises:
            ValueError: Unknown cluster
            MissingCredentialError: No credential available
            InvalidEndpointError: The WebSocket URL is malformed
            WebSocketConnectError: DNS, TLS, handshake or auth frame failure
            AuthenticationError: The server rejected the key (``wait_for_auth`` only)
        """
        cluster = Cluster.from_string(cluster)
        if config is None:
            config = ClientConfig.resolve(auth_key)

        session = cls(cluster, config, connector=connector)
        await session._open(timeout=timeout, wait_for_auth=wait_for_auth)
        return session

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def subscriptions(self) -> tuple[str, ...]:
        """Patterns subscribed on this session, in subscription order.

        Informational only: it is never used to deduplicate or resend.
        """
        return tuple(self._subscriptions)

    def __repr__(self) -> str:
        return f"WebSocketClient(url={self.url!r}, state={self._state.value})"

    # Lifecycle

    async def _open(self, timeout: float | None, wait_for_auth: bool) -> None:
        if self._state is not SessionState.DISCONNECTED:
            raise SessionStateError(f"Cannot connect a session in state {self._state.value}")

        self._state = SessionState.CONNECTING
        logger.debug(f"Connecting to {self.url}")
        try:
            self._socket = await self._connector(self.url, open_timeout=timeout)
        except InvalidURI as e:
            self._state = SessionState.CLOSED
            raise InvalidEndpointError(f"Invalid WebSocket URL {self.url}: {e}", url=self.url) from e
        except (InvalidHandshake, OSError, asyncio.TimeoutError) as e:
            self._state = SessionState.CLOSED
            raise WebSocketConnectError(f"Failed to connect to {self.url}: {e!r}", url=self.url) from e

        self._state = SessionState.AUTHENTICATING
        try:
            await self._socket.send(build_auth_message(self.config.auth_key))
        except (ConnectionClosed, OSError) as e:
            await self.close()
            raise WebSocketConnectError(f"Failed to send auth frame to {self.url}: {e!r}", url=self.url) from e
        logger.debug(f"Auth frame sent to {self.url}")

        if wait_for_auth:
            await self._await_auth(timeout)

        self._state = SessionState.ACTIVE
        logger.info(f"WebSocket session active on {self.url}")

    async def _await_auth(self, timeout: float | None) -> None:
        """Read frames until an auth status arrives, queueing everything read.

        ``timeout`` bounds the whole wait, not each frame.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        while True:
            remaining = None if deadline is None else max(deadline - loop.time(), 0)
            try:
                frame = await self._read_frame(remaining)
            except (ReceiveTimeoutError, ConnectionClosedError, TransportError) as e:
                await self.close()
                raise WebSocketConnectError(f"No auth reply from {self.url}: {e}", url=self.url) from e

            self._pending.append(frame)
            try:
                status = auth_status(decode_frame(frame))
            except DecodeError:
                logger.debug("Ignoring undecodable frame while waiting for auth reply")
                continue

            if status == AuthStatus.SUCCESS:
                logger.debug(f"Authenticated on {self.url}")
                return
            if status == AuthStatus.FAILED:
                await self.close()
                raise AuthenticationError(f"Server rejected the auth key on {self.url}", url=self.url)

    async def close(self) -> None:
        """Close the session. Safe to call more than once."""
        socket, self._socket = self._socket, None
        was_closed = self._state is SessionState.CLOSED
        self._state = SessionState.CLOSED
        self._pending.clear()

        if socket is None:
            return
        try:
            await socket.close()
        except OSError as e:
            logger.warning(f"Error while closing WebSocket {self.url}: {e}")
        if not was_closed:
            logger.info(f"WebSocket session on {self.url} closed")

    async def __aenter__(self) -> WebSocketClient:
        return self

    async def __aexit__(self, _exc_type, _exc_val, _exc_tb) -> None:
        await self.close()

    # Sending

    def _require_active(self, operation: str) -> None:
        if self._state is not SessionState.ACTIVE:
            raise SessionStateError(f"Cannot {operation} in state {self._state.value}")

    async def _send(self, message: str, operation: str) -> None:
        self._require_active(operation)
        async with self._send_lock:
            # close() may have run while this call waited for the lock
            self._require_active(operation)
            try:
                await self._socket.send(message)
            except ConnectionClosed as e:
                self._mark_remote_closed(e)
                raise ConnectionClosedError(self._close_code, self._close_reason) from e
            except OSError as e:
                raise TransportError(f"Failed to {operation} on {self.url}: {e}") from e

    async def subscribe(self, patterns: Iterable[str]) -> None:
        """Send one subscribe frame for ``patterns``.

        Args:
            patterns: Non-empty list of patterns such as ``T.MSFT`` or ``Q.*``

        Raises:
            ValueError: Empty pattern list or a bare string
            SessionStateError: The session is not ACTIVE
            TransportError: The frame could not be written
            ConnectionClosedError: The connection was closed
        """
        pattern_list = normalize_patterns(patterns)
        await self._send(build_subscribe_message(pattern_list), "subscribe")
        for pattern in pattern_list:
            if pattern not in self._subscriptions:
                self._subscriptions.append(pattern)
        logger.debug(f"Subscribed to {','.join(pattern_list)} on {self.url}")

    async def unsubscribe(self, patterns: Iterable[str]) -> None:
        """Send one unsubscribe frame for ``patterns``.

        Raises:
            ValueError: Empty pattern list or a bare string
            SessionStateError: The session is not ACTIVE
            TransportError: The frame could not be written
            ConnectionClosedError: The connection was closed
        """
        pattern_list = normalize_patterns(patterns)
        await self._send(build_unsubscribe_message(pattern_list), "unsubscribe")
        self._subscriptions = [p for p in self._subscriptions if p not in pattern_list]
        logger.debug(f"Unsubscribed from {','.join(pattern_list)} on {self.url}")

    # Receiving

    def _mark_remote_closed(self, exc: ConnectionClosed) -> None:
        self._close_code, self._close_reason = _close_details(exc)
        self._state = SessionState.CLOSED
        self._pending.clear()
        logger.info(f"WebSocket {self.url} closed by peer (code={self._close_code}, reason={self._close_reason!r})")

    async def _read_frame(self, timeout: float | None) -> str | bytes:
        try:
            if timeout is None:
                return await self._socket.recv()
            return await asyncio.wait_for(self._socket.recv(), timeout)
        except asyncio.TimeoutError as e:
            raise ReceiveTimeoutError(timeout) from e
        except ConnectionClosed as e:
            self._mark_remote_closed(e)
            raise ConnectionClosedError(self._close_code, self._close_reason) from e
        except OSError as e:
            raise TransportError(f"Failed to read from {self.url}: {e}") from e

    async def receive(self, timeout: float | None = None) -> str | bytes:
        """Return the next raw frame in transport order.

        Args:
            timeout: Seconds to wait for a frame. None waits indefinitely.

        Raises:
            ReceiveTimeoutError: No frame within ``timeout``; the session stays ACTIVE
            ConnectionClosedError: The connection is closed (also on every later call)
            TransportError: The frame could not be read
            SessionStateError: The session was never connected
        """
        if self._state is SessionState.CLOSED:
            raise ConnectionClosedError(self._close_code, self._close_reason)
        self._require_active("receive")

        if self._pending:
            return self._pending.popleft()
        return await self._read_frame(timeout)

    async def receive_json(self, timeout: float | None = None) -> list[dict[str, Any]]:
        """Return the next frame decoded into a list of event dicts.

        Raises:
            DecodeError: The frame is not a JSON array of objects
        """
        return decode_frame(await self.receive(timeout))

    def __aiter__(self) -> WebSocketClient:
        return self

    async def __anext__(self) -> str | bytes:
        try:
            return await self.receive()
        except ConnectionClosedError:
            raise StopAsyncIteration from None
