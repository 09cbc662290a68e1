#!/usr/bin/env python
"""Centralized configuration for the polygon.io client.

This module centralizes the constants used by the REST and WebSocket clients and
provides ``ClientConfig``, the immutable value that carries the resolved
credential and endpoints into each client.

The process environment is consulted only by ``ClientConfig.resolve()``. Clients
receive the resolved value and never read environment variables themselves.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

import attrs

from polygon_client.utils.exceptions import ConfigurationError, MissingCredentialError

# Environment variables
AUTH_KEY_ENV_VAR: Final = "POLYGON_AUTH_KEY"
API_URL_ENV_VAR: Final = "POLYGON_API_URL"

# Endpoints
DEFAULT_API_URL: Final = "https://api.polygon.io"
DEFAULT_WS_HOST: Final = "wss://socket.polygon.io"

# HTTP Client configuration
DEFAULT_ACCEPT_HEADER: Final[str] = "application/json"
DEFAULT_USER_AGENT: Final[str] = "polygon-client-python/0.1"
DEFAULT_MAX_CONNECTIONS: Final = 10

# Number of response body characters kept on HTTPError
ERROR_BODY_PREVIEW_LENGTH: Final = 200


def _strip_trailing_slash(url: str) -> str:
    return url.rstrip("/")


def _positive_or_none(_instance, attribute, value) -> None:
    if value is not None and value <= 0:
        raise ConfigurationError(f"{attribute.name} must be positive, got {value}")


@attrs.define(slots=True, frozen=True)
class ClientConfig:
    """Resolved configuration shared by the REST and WebSocket clients.

    Attributes:
        auth_key: API key sent as bearer token (REST) or in the auth frame (WebSocket).
        api_url: Base URL for REST requests, without trailing slash.
        ws_host: Scheme and host for WebSocket sessions, without trailing slash.
        timeout: Optional REST request timeout in seconds.

    Example:
        >>> config = ClientConfig.resolve(auth_key="my-key", timeout=10)
        >>> config.api_url
        'https://api.polygon.io'
    """

    auth_key: str = attrs.field(repr=False, validator=attrs.validators.instance_of(str))
    api_url: str = attrs.field(default=DEFAULT_API_URL, converter=_strip_trailing_slash)
    ws_host: str = attrs.field(default=DEFAULT_WS_HOST, converter=_strip_trailing_slash)
    timeout: float | None = attrs.field(
        default=None,
        validator=[
            attrs.validators.optional(attrs.validators.instance_of((int, float))),
            _positive_or_none,
        ],
    )

    @auth_key.validator
    def _check_auth_key(self, _attribute, value: str) -> None:
        if not value:
            raise MissingCredentialError()

    @classmethod
    def resolve(
        cls,
        auth_key: str | None = None,
        timeout: float | None = None,
        *,
        api_url: str | None = None,
        ws_host: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ClientConfig:
        """Build a config from explicit arguments with environment fallbacks.

        Resolution order for the credential is the ``auth_key`` argument, then
        ``POLYGON_AUTH_KEY``. The REST base URL comes from ``api_url``, then
        ``POLYGON_API_URL``, then the public default.

        Args:
            auth_key: Explicit API key
            timeout: REST request timeout in seconds
            api_url: Explicit REST base URL
            ws_host: Explicit WebSocket host (``wss://...``)
            environ: Mapping used instead of ``os.environ`` (mainly for tests)

        Returns:
            Frozen ClientConfig

        Raises:
            MissingCredentialError: If no credential is available
            ConfigurationError: If a value is invalid
        """
        env = os.environ if environ is None else environ

        key = auth_key or env.get(AUTH_KEY_ENV_VAR)
        if not key:
            raise MissingCredentialError()

        return cls(
            auth_key=key,
            api_url=api_url or env.get(API_URL_ENV_VAR) or DEFAULT_API_URL,
            ws_host=ws_host or DEFAULT_WS_HOST,
            timeout=timeout,
        )
