"""
Context window sizes for cloud models.

Matched by longest name prefix so dated snapshots (``gpt-4-0613``) resolve to
their family. Unknown names fall back to ``DEFAULT_CONTEXT_LIMIT``.
"""

from __future__ import annotations

from typing import Dict, Optional

DEFAULT_CONTEXT_LIMIT = 4096

MODEL_CONTEXT_LIMITS: Dict[str, int] = {
    "gpt-4o": 128000,
    "gpt-4-turbo": 128000,
    "gpt-4-1106": 128000,
    "gpt-4-0125": 128000,
    "gpt-4-32k": 32768,
    "gpt-4": 8192,
    "gpt-3.5-turbo-16k": 16385,
    "gpt-3.5-turbo-instruct": 4096,
    "gpt-3.5-turbo": 16385,
    "text-davinci-003": 4097,
    "text-davinci-002": 4097,
    "code-davinci-002": 8001,
}


def lookup_context_limit(model_name: str) -> Optional[int]:
    """Return the limit for the longest matching prefix, or ``None``."""
    best: Optional[str] = None
    for prefix in MODEL_CONTEXT_LIMITS:
        if model_name.startswith(prefix) and (best is None or len(prefix) > len(best)):
            best = prefix
    return MODEL_CONTEXT_LIMITS[best] if best is not None else None


__all__ = ["DEFAULT_CONTEXT_LIMIT", "MODEL_CONTEXT_LIMITS", "lookup_context_limit"]
