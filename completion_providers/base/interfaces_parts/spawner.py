"""Spawner Protocol (single-class module).

The execution capability the streaming client needs: start a coroutine in
the background and return without waiting for it.
"""

from __future__ import annotations

from typing import Any, Coroutine, Optional, Protocol, runtime_checkable


@runtime_checkable
class Spawner(Protocol):
    def spawn(self, coro: Coroutine[Any, Any, Any], *, name: Optional[str] = None) -> Any:
        """Schedule ``coro`` for detached execution and return a handle to it."""
        ...


__all__ = ["Spawner"]
