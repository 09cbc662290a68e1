#!/usr/bin/env python3
"""Custom exceptions for the polygon.io client.

This module defines specialized exceptions to provide precise error handling for
both the REST and WebSocket clients. Calling code can catch a whole family
(``RestAPIError``, ``WebSocketError``) or a single failure kind.

All exceptions derive from ``PolygonError``.
"""

from __future__ import annotations

__all__ = [
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
]


class PolygonError(Exception):
    """Base exception for all polygon client errors."""

    def __init__(self, message="polygon client error occurred") -> None:
        """Initialize PolygonError with an error message.

        Args:
            message: Error description.
        """
        self.message = message
        super().__init__(self.message)


class ConfigurationError(PolygonError):
    """Exception raised when the client configuration is invalid."""


class MissingCredentialError(ConfigurationError):
    """Exception raised when no API key was given and POLYGON_AUTH_KEY is unset."""

    def __init__(self, message="POLYGON_AUTH_KEY not set and no auth_key provided") -> None:
        super().__init__(message)


class DecodeError(PolygonError):
    """Exception raised when a payload cannot be decoded into the expected structure."""

    def __init__(self, message="Failed to decode payload", payload_preview=None) -> None:
        """Initialize DecodeError.

        Args:
            message: Error description.
            payload_preview: Leading part of the offending payload, if available.
        """
        self.payload_preview = payload_preview
        super().__init__(message)


# REST


class RestAPIError(PolygonError):
    """Base exception for all REST API related errors."""


class HTTPError(RestAPIError):
    """Exception raised when the REST API answers with a non-2xx status."""

    def __init__(self, status_code, message=None, url=None, body=None) -> None:
        """Initialize HTTPError with status code.

        Args:
            status_code: HTTP status code.
            message: Error description.
            url: Requested URL (without credentials).
            body: Leading part of the response body.
        """
        self.status_code = status_code
        self.url = url
        self.body = body
        message = message or f"HTTP error {status_code}"
        super().__init__(message)


class NetworkError(RestAPIError):
    """Exception raised when a network error occurs during REST API requests."""

    def __init__(self, message="Network error during REST API request") -> None:
        super().__init__(message)


class RestTimeoutError(NetworkError):
    """Exception raised when a REST API request times out."""

    def __init__(self, message="REST API request timed out") -> None:
        super().__init__(message)


# WebSocket


class WebSocketError(PolygonError):
    """Base exception for all WebSocket session errors."""


class WebSocketConnectError(WebSocketError):
    """Exception raised when a session cannot be established (DNS, TLS, handshake)."""

    def __init__(self, message="Failed to connect", url=None) -> None:
        """Initialize WebSocketConnectError.

        Args:
            message: Error description.
            url: Endpoint the client tried to reach.
        """
        self.url = url
        super().__init__(message)


class InvalidEndpointError(WebSocketConnectError):
    """Exception raised when the WebSocket URL is malformed."""


class AuthenticationError(WebSocketConnectError):
    """Exception raised when the server rejects the auth frame."""


class TransportError(WebSocketError):
    """Exception raised when a frame cannot be written or read mid-session."""


class ReceiveTimeoutError(TransportError):
    """Exception raised when no frame arrived before the receive deadline."""

    def __init__(self, timeout) -> None:
        self.timeout = timeout
        super().__init__(f"No frame received within {timeout}s")


class ConnectionClosedError(WebSocketError):
    """Exception raised when the connection has been closed."""

    def __init__(self, code=None, reason="", message=None) -> None:
        """Initialize ConnectionClosedError.

        Args:
            code: WebSocket close code, if one was received.
            reason: Close reason sent by the peer.
            message: Error description.
        """
        self.code = code
        self.reason = reason
        if message is None:
            message = f"Connection closed (code={code}, reason={reason!r})" if code is not None else "Connection closed"
        super().__init__(message)


class SessionStateError(WebSocketError):
    """Exception raised when an operation is not allowed in the session's current state."""
