"""Base shared constants for the completion layer.

Central location to avoid scattering magic strings across the streaming
client and provider adapters.

# pragma: allowlist secret
"""
from __future__ import annotations

# Server-sent-event line marker; only lines with this exact prefix carry frames
DATA_PREFIX = "data: "

# Terminal payload some servers send after the finish frame
DONE_SENTINEL = "[DONE]"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Streams have no overall read timeout; callers bound them externally
DEFAULT_STREAM_HTTP_TIMEOUT = None

__all__ = [
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "MISSING_API_KEY_ERROR",
    "DEFAULT_STREAM_HTTP_TIMEOUT",
]
