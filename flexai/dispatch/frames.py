"""Server-sent-event line framing.

A frame is one body line starting with the literal ``"data: "`` prefix; its
payload is the rest of the line. No other SSE fields (``event:``, ``id:``,
comments) are interpreted and the ``[DONE]`` sentinel is not special-cased:
it is a payload like any other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import FRAME_PREFIX


def frame_payload(line: str, prefix: str = FRAME_PREFIX) -> Optional[str]:
    """Return the payload of ``line`` or ``None`` if it is not a frame."""
    if not line.startswith(prefix):
        return None
    return line[len(prefix):]


@dataclass
class StreamSummary:
    """Outcome counters of one ``Dispatcher.stream`` call.

    Attributes:
        delivered: Frames decoded and handed to the callback.
        dropped: Frames whose payload failed to decode (skipped silently).
        ignored: Lines without the frame prefix.
        cancelled: The call stopped because its cancellation token fired.
    """

    delivered: int = 0
    dropped: int = 0
    ignored: int = 0
    cancelled: bool = False


__all__ = ["frame_payload", "StreamSummary"]
