"""
Background execution capability.

Purpose
-------
Run the streaming decode loop as a detached task on the running event loop
without blocking the caller. Providers hold a shared handle to one executor;
copying a provider never creates a new one.

Failure semantics
-----------------
Tasks are expected to report failures through their own channel. Anything
that still escapes a task is logged as ``executor.task_failed`` when the task
finishes, so background failures are never silent.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Optional, Set

from .logging import get_logger, log_event

_logger = get_logger("completion.executor")


class BackgroundExecutor:
    """Spawn coroutines as tasks and keep them referenced until they finish."""

    def __init__(self) -> None:
        self._tasks: Set[asyncio.Task[Any]] = set()

    def spawn(self, coro: Coroutine[Any, Any, Any], *, name: Optional[str] = None) -> asyncio.Task[Any]:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log_event(
                _logger,
                "executor.task_failed",
                level=logging.ERROR,
                task=task.get_name(),
                error=repr(exc),
            )

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every task spawned so far; failures were already logged."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)


__all__ = ["BackgroundExecutor"]
