"""
Explicitly owned cache of loaded language models.

Loading a vocabulary is the expensive part of building a model, so a model
is constructed once per name and shared by every provider created through the
same cache. The cache is an ordinary object owned by whoever builds providers
(normally the provider factory's ``ProviderFactory``); there
is no process-wide state.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Dict, Tuple, TypeVar

M = TypeVar("M")


class LanguageModelCache:
    """Cache-or-load map keyed by (model kind, model name)."""

    def __init__(self) -> None:
        self._models: Dict[Tuple[str, str], object] = {}
        self._lock = threading.RLock()

    def get_or_load(self, name: str, loader: Callable[[str], M]) -> M:
        """Return the cached model for ``name`` or build it with ``loader``."""
        key = (getattr(loader, "__qualname__", repr(loader)), name)
        with self._lock:
            if key not in self._models:
                self._models[key] = loader(name)
            return self._models[key]  # type: ignore[return-value]

    async def aget_or_load(self, name: str, loader: Callable[[str], M]) -> M:
        """Async variant running ``loader`` in a worker thread."""
        return await asyncio.to_thread(self.get_or_load, name, loader)

    def clear(self) -> None:
        with self._lock:
            self._models.clear()

    def __len__(self) -> int:
        return len(self._models)


__all__ = ["LanguageModelCache"]
