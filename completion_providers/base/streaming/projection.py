"""
Delta projection from stream events to text fragments.

Each event is reduced to the delta content of its *last* choice. Events with
no choices produce nothing; a choice without content produces ``""``.
"""

from __future__ import annotations

import weakref
from typing import AsyncIterable, Optional

from ..dto import StreamEvent
from ..errors import ProviderError
from .channel import EventChannel
from .stream_completion import StreamItem


def project_delta(event: StreamEvent) -> Optional[str]:
    choice = event.last_choice
    if choice is None:
        return None
    return choice.delta.content or ""


class FragmentStream:
    """Fragments in arrival order; an error item is raised after earlier fragments.

    The stream owns the channel receiver. ``aclose()``, exhaustion, an error
    item, or garbage collection at any point (including before the first
    ``__anext__``) closes it, which stops the decode loop on its next send.
    """

    def __init__(self, channel: EventChannel[StreamItem]) -> None:
        self._channel = channel
        self._release = weakref.finalize(self, channel.close)

    @property
    def channel(self) -> EventChannel[StreamItem]:
        return self._channel

    def __aiter__(self) -> "FragmentStream":
        return self

    async def __anext__(self) -> str:
        while True:
            try:
                item = await self._channel.__anext__()
            except StopAsyncIteration:
                self._release()
                raise
            if isinstance(item, ProviderError):
                self._release()
                raise item
            fragment = project_delta(item)
            if fragment is not None:
                return fragment

    async def aclose(self) -> None:
        self._release()


def iter_fragments(channel: EventChannel[StreamItem]) -> FragmentStream:
    return FragmentStream(channel)


async def collect_completion(fragments: AsyncIterable[str]) -> str:
    """Drain a fragment sequence into one string."""
    parts = [fragment async for fragment in fragments]
    return "".join(parts)


__all__ = ["FragmentStream", "project_delta", "iter_fragments", "collect_completion"]
