"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `flexai.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .api_error import APIError
from .request_errors import EncodingError, InvalidURL
from .response_errors import DecodingError, HTTPError, InvalidResponse
from .classification import classify_exception, code_for_status

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
