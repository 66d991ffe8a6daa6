"""Image payloads.

The same request shape is posted to the generation, edit and variation
endpoints; only the endpoint path differs.
"""

from __future__ import annotations

from typing import List, Optional

from .base import WireModel


class ImageGenerationRequest(WireModel):
    prompt: str
    model: Optional[str] = None
    n: Optional[int] = None
    quality: Optional[str] = None
    response_format: Optional[str] = None
    size: Optional[str] = None
    style: Optional[str] = None
    user: Optional[str] = None


class ImageData(WireModel):
    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None


class ImageResponse(WireModel):
    created: int
    data: List[ImageData]


__all__ = ["ImageGenerationRequest", "ImageData", "ImageResponse"]
