"""Shared pydantic base for every wire payload.

Field names are the snake_case wire names, so no alias table is needed and a
model round-trips through JSON unchanged. Binary fields travel as base64
strings in JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Base class for request and response payloads."""

    model_config = ConfigDict(
        ser_json_bytes="base64",
        val_json_bytes="base64",
        extra="ignore",
    )

    def to_wire(self) -> bytes:
        """Serialize to JSON bytes, omitting fields that are unset (``None``)."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")


__all__ = ["WireModel"]
