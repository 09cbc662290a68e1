#!/usr/bin/env python
"""Root conftest.py that provides fixtures for the test suite.

This file contains:
1. Environment isolation so a developer's POLYGON_* variables never leak into tests
2. A fake WebSocket and connector injected through WebSocketClient's connector hook
3. Helpers for building an httpx.MockTransport-backed RESTClient
"""

import asyncio
import json

import httpx
import pytest
from websockets.exceptions import ConnectionClosedError as WsConnectionClosedError
from websockets.exceptions import ConnectionClosedOK
from websockets.frames import Close

from polygon_client.rest.client import RESTClient
from polygon_client.utils.config import ClientConfig

TEST_AUTH_KEY = "k1"
TEST_API_URL = "https://api.test.polygon.io"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark tests that integrate with external services")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove POLYGON_* variables for every test."""
    for name in ("POLYGON_AUTH_KEY", "POLYGON_API_URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    """Resolved configuration with a test key and base URL."""
    return ClientConfig(auth_key=TEST_AUTH_KEY, api_url=TEST_API_URL)


class _RemoteClose:
    def __init__(self, code, reason):
        self.code = code
        self.reason = reason


class FakeSocket:
    """In-memory stand-in for a websockets connection.

    Frames queued with ``feed`` are returned by ``recv`` in order. ``remote_close``
    queues a close so the next ``recv`` raises ``ConnectionClosed``.
    """

    def __init__(self, frames=()):
        self.sent = []
        self.closed = False
        self.recv_calls = 0
        self.send_error = None
        self._incoming = asyncio.Queue()
        for frame in frames:
            self.feed(frame)

    def feed(self, frame):
        self._incoming.put_nowait(frame)

    def feed_json(self, events):
        self.feed(json.dumps(events))

    def remote_close(self, code=1000, reason=""):
        self._incoming.put_nowait(_RemoteClose(code, reason))

    async def send(self, message):
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(message)

    async def recv(self):
        self.recv_calls += 1
        item = await self._incoming.get()
        if isinstance(item, _RemoteClose):
            close = Close(item.code, item.reason)
            if item.code == 1000:
                raise ConnectionClosedOK(close, None)
            raise WsConnectionClosedError(close, None)
        return item

    async def close(self):
        self.closed = True


class FakeConnector:
    """Connector recording the URLs it was asked to open."""

    def __init__(self, socket=None):
        self.socket = socket if socket is not None else FakeSocket()
        self.error = None
        self.urls = []
        self.open_timeouts = []

    async def __call__(self, url, open_timeout=None):
        self.urls.append(url)
        self.open_timeouts.append(open_timeout)
        if self.error is not None:
            raise self.error
        return self.socket


@pytest.fixture
def fake_socket():
    return FakeSocket()


@pytest.fixture
def fake_connector(fake_socket):
    return FakeConnector(fake_socket)


@pytest.fixture
def make_rest_client(config):
    """Factory building a RESTClient whose requests go to a MockTransport handler.

    Every request seen by the handler is appended to ``client.requests``.
    """
    clients = []

    def _make(handler):
        requests = []

        def _recording_handler(request):
            requests.append(request)
            return handler(request)

        http_client = httpx.Client(transport=httpx.MockTransport(_recording_handler))
        client = RESTClient(config=config, client=http_client)
        client.requests = requests
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
