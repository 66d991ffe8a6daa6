"""Request body encoding and response body decoding.

Decode targets:
    - ``bytes``: the raw body is returned untouched (binary audio).
    - ``str``: the body decoded as UTF-8 (plain-text transcriptions).
    - anything else: parsed as JSON and validated through a cached
      ``pydantic.TypeAdapter`` (pydantic models, ``ListResponse[Model]``,
      ``dict``, ``list[int]`` ...).
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..base.errors import DecodingError, EncodingError
from ..models.base import WireModel

T = TypeVar("T")


@lru_cache(maxsize=128)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _adapter(target: Any) -> TypeAdapter:
    try:
        hash(target)
    except TypeError:
        # unhashable targets (Annotated with list or dict metadata) skip the cache
        return TypeAdapter(target)
    return _cached_adapter(target)


def encode_body(body: Optional[Any]) -> Optional[bytes]:
    """Serialize a request body to JSON bytes (``None`` when there is no body).

    Pydantic models omit unset optional fields; other values go through
    ``json.dumps``; raw ``bytes`` are sent as-is.

    Raises:
        EncodingError: The value cannot be represented as JSON.
    """
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    try:
        if isinstance(body, WireModel):
            return body.to_wire()
        if isinstance(body, BaseModel):
            return body.model_dump_json(exclude_none=True).encode("utf-8")
        return json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise EncodingError(f"cannot encode {type(body).__name__} body: {e}", cause=e) from e


def decode_body(content: bytes, target: Type[T]) -> T:
    """Parse a complete response body as ``target``.

    Raises:
        DecodingError: The body does not parse into ``target``.
    """
    if target is bytes:
        return content  # type: ignore[return-value]
    if target is str:
        try:
            return content.decode("utf-8")  # type: ignore[return-value]
        except UnicodeDecodeError as e:
            raise DecodingError(f"response body is not UTF-8 text: {e}", cause=e) from e
    try:
        return _adapter(target).validate_json(content)
    except (ValidationError, ValueError) as e:
        raise DecodingError(f"cannot decode response as {_type_name(target)}: {e}", cause=e) from e


def decode_frame(payload: str, target: Type[T]) -> T:
    """Parse one stream frame payload as ``target``; raises like ``decode_body``."""
    if target is str:
        return payload  # type: ignore[return-value]
    return decode_body(payload.encode("utf-8"), target)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


__all__ = ["encode_body", "decode_body", "decode_frame"]
