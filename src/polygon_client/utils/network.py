#!/usr/bin/env python
"""HTTP client factory functions."""

from __future__ import annotations

import platform
from typing import Any

import httpx
from httpx import Limits, Timeout

from polygon_client.utils.config import DEFAULT_ACCEPT_HEADER, DEFAULT_MAX_CONNECTIONS, DEFAULT_USER_AGENT
from polygon_client.utils.loguru_setup import logger

__all__ = [
    "create_httpx_client",
    "default_headers",
    "safely_close_client",
]


def default_headers() -> dict[str, str]:
    """Headers sent with every REST request (authorization is added per request)."""
    return {
        "User-Agent": f"{DEFAULT_USER_AGENT} Python/{platform.python_version()}",
        "Accept": DEFAULT_ACCEPT_HEADER,
    }


def create_httpx_client(
    timeout: float | None = None,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
    headers: dict[str, str] | None = None,
    **kwargs: Any,
) -> httpx.Client:
    """Create an httpx Client for REST requests.

    Args:
        timeout: Request timeout in seconds, or None to wait indefinitely
        max_connections: Maximum number of pooled connections
        headers: Optional headers to include in all requests
        **kwargs: Additional keyword arguments to pass to Client

    Returns:
        httpx.Client: An initialized HTTP client
    """
    # httpx.Timeout needs either a default or all four values
    timeout_obj = Timeout(timeout)

    limits = Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(1, max_connections // 2),
    )

    client = httpx.Client(
        timeout=timeout_obj,
        limits=limits,
        headers=headers if headers is not None else default_headers(),
        follow_redirects=True,
        **kwargs,
    )

    logger.debug(f"Created httpx Client with timeout={timeout}s, max_connections={max_connections}")
    return client


def safely_close_client(client: httpx.Client | None) -> None:
    """Close an HTTP client, logging rather than raising on OS-level errors.

    Args:
        client: HTTP client to close
    """
    if client is None:
        return

    try:
        client.close()
        logger.debug("HTTP client closed successfully")
    except OSError as e:
        logger.warning(f"Error while closing HTTP client: {e}")
