"""Cooperative cancellation primitives (public API facade).

Expose the cancellation token via the canonical
``flexai.base.cancellation`` import path while the implementation lives under
``cancellation_parts``.
"""

from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken"]
