#!/usr/bin/env python
"""Control-frame framing and inbound frame decoding.

Outbound frames are compact JSON objects with ``action`` first and ``params``
second, e.g. ``{"action":"subscribe","params":"T.MSFT,Q.AAPL"}``. Inbound frames
are JSON arrays of event objects; the session hands them to callers raw and
only decodes them on request.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from polygon_client.utils.exceptions import DecodeError

__all__ = [
    "AUTH_ACTION",
    "SUBSCRIBE_ACTION",
    "UNSUBSCRIBE_ACTION",
    "AuthStatus",
    "auth_status",
    "build_auth_message",
    "build_subscribe_message",
    "build_unsubscribe_message",
    "decode_frame",
    "normalize_patterns",
]

AUTH_ACTION = "auth"
SUBSCRIBE_ACTION = "subscribe"
UNSUBSCRIBE_ACTION = "unsubscribe"

PATTERN_SEPARATOR = ","
FRAME_PREVIEW_LENGTH = 200


class AuthStatus:
    """Values of the ``status`` field in auth status events."""

    SUCCESS = "auth_success"
    FAILED = "auth_failed"


def _control_message(action: str, params: str) -> str:
    return json.dumps({"action": action, "params": params}, separators=(",", ":"))


def normalize_patterns(patterns: Iterable[str]) -> list[str]:
    """Validate a pattern list and return it as a list.

    Raises:
        ValueError: If ``patterns`` is empty or not a list of strings
    """
    if isinstance(patterns, (str, bytes)):
        raise ValueError("patterns must be a list of strings, not a single string")
    pattern_list = list(patterns)
    if not pattern_list:
        raise ValueError("patterns must not be empty")
    for pattern in pattern_list:
        if not isinstance(pattern, str):
            raise ValueError(f"pattern must be a string, got {type(pattern).__name__}")
    return pattern_list


def build_auth_message(auth_key: str) -> str:
    """Auth frame carrying the credential verbatim."""
    return _control_message(AUTH_ACTION, auth_key)


def build_subscribe_message(patterns: Iterable[str]) -> str:
    """Subscribe frame with patterns comma-joined in input order.

    Raises:
        ValueError: If ``patterns`` is empty or a bare string
    """
    return _control_message(SUBSCRIBE_ACTION, PATTERN_SEPARATOR.join(normalize_patterns(patterns)))


def build_unsubscribe_message(patterns: Iterable[str]) -> str:
    """Unsubscribe frame with patterns comma-joined in input order.

    Raises:
        ValueError: If ``patterns`` is empty or a bare string
    """
    return _control_message(UNSUBSCRIBE_ACTION, PATTERN_SEPARATOR.join(normalize_patterns(patterns)))


def decode_frame(frame: str | bytes) -> list[dict[str, Any]]:
    """Decode an inbound frame into a list of event dicts.

    A frame holding a single JSON object is returned as a one-element list.

    Raises:
        DecodeError: If the frame is not JSON or not an object/array of objects
    """
    try:
        decoded = json.loads(frame)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Frame is not valid JSON: {e}", payload_preview=repr(frame)[:FRAME_PREVIEW_LENGTH]) from e

    if isinstance(decoded, dict):
        decoded = [decoded]
    if not isinstance(decoded, list) or not all(isinstance(event, dict) for event in decoded):
        raise DecodeError(
            f"Frame is not a JSON array of event objects (got {type(decoded).__name__})",
            payload_preview=repr(frame)[:FRAME_PREVIEW_LENGTH],
        )
    return decoded


def auth_status(events: list[dict[str, Any]]) -> str | None:
    """Return the auth outcome carried by a decoded frame, if any."""
    for event in events:
        if event.get("ev") == "status" and event.get("status") in (AuthStatus.SUCCESS, AuthStatus.FAILED):
            return event["status"]
    return None
