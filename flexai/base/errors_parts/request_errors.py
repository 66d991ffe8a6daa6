"""
Failures raised while building a request, before any network I/O happens.
"""
from __future__ import annotations

from .api_error import APIError
from .error_code import ErrorCode


class InvalidURL(APIError):
    """The base URL, path, or query items could not be composed into a URL."""

    default_code = ErrorCode.INVALID_URL


class EncodingError(APIError):
    """The request body could not be serialized to JSON."""

    default_code = ErrorCode.ENCODING


__all__ = ["InvalidURL", "EncodingError"]
