"""Unified client error taxonomy public surface.

This module re-exports the implementations under ``flexai.base.errors_parts``
to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.api_error import APIError
from .errors_parts.request_errors import EncodingError, InvalidURL
from .errors_parts.response_errors import DecodingError, HTTPError, InvalidResponse
from .errors_parts.classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "APIError",
    "InvalidURL",
    "EncodingError",
    "InvalidResponse",
    "HTTPError",
    "DecodingError",
    "classify_exception",
    "code_for_status",
]
