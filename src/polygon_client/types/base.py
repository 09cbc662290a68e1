#!/usr/bin/env python
"""Base model and decoder for polygon.io response types.

Every response type is a pydantic model whose attribute names are pythonic and
whose aliases are the JSON keys used by the API. Unknown keys are ignored;
missing required keys are a decode failure.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from polygon_client.utils.exceptions import DecodeError

__all__ = [
    "PolygonModel",
    "decode_response",
]

T = TypeVar("T")

PAYLOAD_PREVIEW_LENGTH = 200


class PolygonModel(BaseModel):
    """Common configuration for all response models."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_response(response_type: type[T] | Any, payload: Any) -> T:
    """Validate a decoded JSON value against a response type.

    Args:
        response_type: A PolygonModel subclass or a generic alias such as
            ``list[StockEquitiesExchange]`` or ``dict[int, str]``
        payload: Value produced by ``json.loads``

    Returns:
        Instance of ``response_type``

    Raises:
        DecodeError: If the payload does not match the expected structure
    """
    try:
        return _adapter(response_type).validate_python(payload)
    except ValidationError as e:
        type_name = getattr(response_type, "__name__", str(response_type))
        raise DecodeError(
            f"Response does not match {type_name}: {e.error_count()} validation error(s); first: {e.errors()[0]['msg']} "
            f"at {'.'.join(str(loc) for loc in e.errors()[0]['loc'])}",
            payload_preview=repr(payload)[:PAYLOAD_PREVIEW_LENGTH],
        ) from e
