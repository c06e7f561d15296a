"""
Unbounded single-producer/single-consumer channel for stream items.

The background decode loop is the only sender and the consumer is the only
receiver. Sends never block. Once the receiver is closed every later ``send``
returns ``False``, which is how the producer learns the consumer has gone
away.
"""

from __future__ import annotations

import asyncio
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_CLOSED: Any = object()


class EventChannel(Generic[T]):
    """FIFO channel; async-iterate to receive, ``close()`` to drop the receiver."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._sender_closed = False
        self._receiver_closed = False
        self.sent = 0

    @property
    def receiver_closed(self) -> bool:
        return self._receiver_closed

    def send(self, item: T) -> bool:
        """Enqueue ``item``; ``False`` when the receiver has been dropped."""
        if self._receiver_closed or self._sender_closed:
            return False
        self._queue.put_nowait(item)
        self.sent += 1
        return True

    def close_sender(self) -> None:
        """Mark end of stream; the receiver finishes after draining queued items."""
        if not self._sender_closed:
            self._sender_closed = True
            self._queue.put_nowait(_CLOSED)

    def close(self) -> None:
        """Drop the receiving side and discard anything still queued."""
        self._receiver_closed = True
        while not self._queue.empty():
            self._queue.get_nowait()

    async def aclose(self) -> None:
        self.close()

    def __aiter__(self) -> "EventChannel[T]":
        return self

    async def __anext__(self) -> T:
        if self._receiver_closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED:
            self._queue.put_nowait(_CLOSED)
            raise StopAsyncIteration
        return item


__all__ = ["EventChannel"]
