"""Shared testing utilities for streaming and tokenizer tests.

Purpose:
    Build stream frames, mock HTTP clients and an offline byte-level
    vocabulary so tests never touch the network.

Exports:
    - frame(...) -> str
    - sse_body(lines) -> bytes
    - CountingStream: ``httpx.AsyncByteStream`` that counts chunk reads
    - mock_client(handler) -> httpx.AsyncClient
    - byte_encoding() -> tiktoken.Encoding
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Dict, Iterable, List, Optional

import httpx
import tiktoken

GPT2_PATTERN = r"""'s|'t|'re|'ve|'m|'ll|'d| ?\p{L}+| ?\p{N}+| ?[^\s\p{L}\p{N}]+|\s+(?!\S)|\s+"""


def frame(
    content: Optional[str] = None,
    finish_reason: Optional[str] = None,
    *,
    role: Optional[str] = None,
    choices: bool = True,
    usage: Optional[Dict[str, int]] = None,
) -> str:
    """Return one ``data: `` line carrying a single-choice stream event."""
    delta: Dict[str, Any] = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    event: Dict[str, Any] = {
        "id": "chatcmpl-1",
        "object": "chat.completion.chunk",
        "created": 1700000000,
        "model": "codellama:7b",
        "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}] if choices else [],
    }
    if usage is not None:
        event["usage"] = usage
    return "data: " + json.dumps(event)


def sse_body(lines: Iterable[str]) -> bytes:
    return "".join(f"{line}\n" for line in lines).encode("utf-8")


class CountingStream(httpx.AsyncByteStream):
    """Yields one line per chunk and counts how many chunks were pulled.

    When ``gate_after`` is set, the stream waits on ``gate`` before yielding
    chunk number ``gate_after`` (0-based).
    """

    def __init__(self, lines: List[str], gate_after: Optional[int] = None, fail_after: Optional[int] = None):
        self.chunks = [f"{line}\n".encode("utf-8") for line in lines]
        self.reads = 0
        self.closed = False
        self.gate = asyncio.Event()
        self.gate_after = gate_after
        self.fail_after = fail_after

    async def __aiter__(self):
        for index, chunk in enumerate(self.chunks):
            if self.gate_after is not None and index == self.gate_after:
                await self.gate.wait()
            if self.fail_after is not None and index == self.fail_after:
                raise httpx.ReadError("connection reset")
            self.reads += 1
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def stream_client(stream: CountingStream, requests: Optional[List[httpx.Request]] = None) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(200, stream=stream)

    return mock_client(handler)


def byte_encoding(name: str = "bytes_test") -> tiktoken.Encoding:
    """Offline vocabulary with exactly one token per byte."""
    return tiktoken.Encoding(
        name=name,
        pat_str=GPT2_PATTERN,
        mergeable_ranks={bytes([i]): i for i in range(256)},
        special_tokens={"<|endoftext|>": 256},
    )
