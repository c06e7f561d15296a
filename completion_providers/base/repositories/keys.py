"""
Keys Repository

Purpose
- Centralize API key resolution, storage and removal for providers.
- Prefer environment variables; fall back to the external config file.

Design
- Non-throwing accessors that return None if a key is not resolved.
- Storing a key exports it to the provider's canonical env var so subsequent
  resolutions (including other processes spawned from this one) see it.

Usage
- repo = KeysRepository()
- key = repo.get_api_key(provider)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ...config.env import clear_provider_key, export_provider_key, is_placeholder, resolve_provider_key


@dataclass
class KeyResolution:
    provider: str
    api_key: Optional[str] = field(repr=False)
    source: str  # "env", "config", "none"
    extra: Dict[str, Any] = field(default_factory=dict)


class KeysRepository:
    """
    Resolve provider credentials with a strict priority order:

    1) Environment variables (authoritative)
    2) ``api_key`` in the provider section of the external config file
    3) None
    """

    def get_api_key(self, provider: str) -> Optional[str]:
        return self.get_resolution(provider).api_key

    def get_resolution(self, provider: str) -> KeyResolution:
        p = (provider or "").lower().strip()
        val, used = resolve_provider_key(p)
        if val:
            return KeyResolution(provider=p, api_key=val, source="env", extra={"env_var": used})

        if cfg_key := self._from_config(p):
            return KeyResolution(provider=p, api_key=cfg_key, source="config")

        return KeyResolution(provider=p, api_key=None, source="none")

    def save_api_key(self, provider: str, api_key: str) -> Optional[str]:
        """Export ``api_key`` for ``provider``; returns the env var written, if any."""
        return export_provider_key(provider, api_key)

    def delete_api_key(self, provider: str) -> None:
        clear_provider_key(provider)

    @staticmethod
    def _from_config(provider: str) -> Optional[str]:
        # Local import: config imports this module lazily as well
        from ...config import _load_external_config

        section = _load_external_config().get(provider)
        if not isinstance(section, dict):
            return None
        val = section.get("api_key")
        if isinstance(val, str) and val and not is_placeholder(val):
            return val
        return None


__all__ = ["KeysRepository", "KeyResolution"]
