"""flexai.config.defaults
======================

Central place for small, stable default values used across the package and
its CLI. These defaults can be overridden via environment variables (see
``flexai.config.env``) or constructor arguments, but provide sensible
fallbacks for local development and tests.

This module intentionally imports nothing from the rest of the package so it
can be used anywhere without circular imports.
"""

from __future__ import annotations

# ---- Wire ----
# Base URL used when neither the caller nor the environment provides one.
DEFAULT_BASE_URL = "https://localhost/v1"
# Literal prefix marking a server-sent-event data line.
FRAME_PREFIX = "data: "
# Media type requested for streaming calls.
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"

# ---- CLI Defaults ----
DEFAULT_CHAT_MODEL = "gpt-4o-mini"

MISSING_API_KEY_ERROR = "missing API key: set FLEXAI_API_KEY (or OPENAI_API_KEY)"
