"""flexai package

Async client SDK for OpenAI-compatible HTTP APIs (chat completions, audio,
images, model listing).

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`FlexAIClient`
    - Dispatch core: :class:`Dispatcher`, :class:`SessionContext`,
      :class:`StreamSummary`
    - Errors: :class:`APIError` and its subclasses, :class:`ErrorCode`
    - Cancellation: :class:`CancellationToken`

Endpoint variants live in ``flexai.endpoints`` and payload models in
``flexai.models``.
"""

from .base.cancellation import CancellationToken
from .base.errors import (
    APIError,
    DecodingError,
    EncodingError,
    ErrorCode,
    HTTPError,
    InvalidResponse,
    InvalidURL,
)
from .client import FlexAIClient
from .dispatch import Dispatcher, SessionContext, StreamSummary

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FlexAIClient",
    "Dispatcher",
    "SessionContext",
    "StreamSummary",
    "CancellationToken",
    "APIError",
    "InvalidURL",
    "InvalidResponse",
    "HTTPError",
    "EncodingError",
    "DecodingError",
    "ErrorCode",
]
