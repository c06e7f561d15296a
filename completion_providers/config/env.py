"""completion_providers.config.env
================================

Centralized environment variable mapping and helpers for provider credentials.

Purpose
-------
- Single source of truth mapping provider identifiers to the environment
  variable holding their API key.
- Small helpers to read, export and clear those variables consistently.

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` (or do nothing) and let callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

# Provider -> env var holding its API key. Local providers need none.
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the API key environment variable for ``provider`` (case-insensitive)."""
    return ENV_MAP.get(provider.lower()) if provider else None


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var)`` for a provider's key, or ``(None, None)``.

    Placeholder values are treated as unset.
    """
    name = get_env_var_name(provider)
    if not name:
        return None, None
    val = os.environ.get(name)
    if not val or is_placeholder(val):
        return None, None
    return val, name


def export_provider_key(provider: str, value: str) -> Optional[str]:
    """Write ``value`` to the provider's env var; returns the variable name used."""
    name = get_env_var_name(provider)
    if name and value:
        os.environ[name] = value
    return name


def clear_provider_key(provider: str) -> None:
    if name := get_env_var_name(provider):
        os.environ.pop(name, None)


__all__ = [
    "ENV_MAP",
    "is_placeholder",
    "get_env_var_name",
    "resolve_provider_key",
    "export_provider_key",
    "clear_provider_key",
]
