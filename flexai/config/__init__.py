"""Configuration helpers: defaults and environment lookups."""

from .defaults import DEFAULT_BASE_URL, FRAME_PREFIX
from .env import is_placeholder, resolve_api_key, resolve_base_url

__all__ = [
    "DEFAULT_BASE_URL",
    "FRAME_PREFIX",
    "is_placeholder",
    "resolve_api_key",
    "resolve_base_url",
]
