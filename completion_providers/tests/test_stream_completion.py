"""Streaming completion client: request shape, decode loop, error paths, cancellation."""

from __future__ import annotations

import asyncio
import gc
import json
from typing import List

import httpx
import pytest

from completion_providers.base.dto import CompletionRequest, RequestMessage, Role
from completion_providers.base.errors import (
    ErrorCode,
    ProtocolError,
    ServerError,
    TransportError,
)
from completion_providers.base.execution import BackgroundExecutor
from completion_providers.base.log_support import LogContext
from completion_providers.base.streaming import (
    EventChannel,
    collect_completion,
    iter_fragments,
    parse_event_line,
    project_delta,
    stream_completion,
)

from .utils import CountingStream, frame, mock_client, sse_body, stream_client

API_URL = "http://models.test/v1"


def _request() -> CompletionRequest:
    return CompletionRequest(
        model="codellama:7b",
        messages=[RequestMessage(role=Role.USER, content="hi")],
    )


async def _fragments(stream: CountingStream, executor: BackgroundExecutor) -> List[str]:
    async with stream_client(stream) as client:
        channel = await stream_completion(API_URL, _request(), executor=executor, client=client)
        out = [fragment async for fragment in iter_fragments(channel)]
        await executor.drain()
    return out


@pytest.mark.asyncio
async def test_posts_serialized_request_with_json_content_type() -> None:
    requests: List[httpx.Request] = []
    stream = CountingStream([frame("ok", "stop")])
    executor = BackgroundExecutor()
    async with stream_client(stream, requests) as client:
        channel = await stream_completion(
            API_URL + "/", _request(), executor=executor, client=client, headers={"X-Trace": "1"}
        )
        await collect_completion(iter_fragments(channel))
        await executor.drain()
    (sent,) = requests
    assert sent.method == "POST"  # nosec B101
    assert str(sent.url) == "http://models.test/v1/chat/completions"  # nosec B101
    assert sent.headers["content-type"] == "application/json"  # nosec B101
    assert sent.headers["x-trace"] == "1"  # nosec B101
    assert json.loads(sent.content) == json.loads(_request().data())  # nosec B101


@pytest.mark.asyncio
async def test_stops_reading_after_finish_reason() -> None:
    stream = CountingStream([frame("Hel"), frame("lo", "stop"), frame("never")])
    out = await _fragments(stream, BackgroundExecutor())
    assert out == ["Hel", "lo"]  # nosec B101
    assert stream.reads == 2  # nosec B101
    assert stream.closed  # nosec B101


@pytest.mark.asyncio
async def test_skips_blank_and_comment_lines() -> None:
    stream = CountingStream(["", frame("a"), "", ": keep-alive", "event: ping", frame("b", "stop")])
    assert await _fragments(stream, BackgroundExecutor()) == ["a", "b"]  # nosec B101


@pytest.mark.asyncio
async def test_role_only_and_empty_choice_frames() -> None:
    stream = CountingStream(
        [
            frame(role="assistant"),
            frame(choices=False),
            frame("x"),
            frame(None, "stop", usage={"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2}),
        ]
    )
    assert await _fragments(stream, BackgroundExecutor()) == ["", "x", ""]  # nosec B101


@pytest.mark.asyncio
async def test_done_sentinel_ends_stream() -> None:
    stream = CountingStream([frame("a"), "data: [DONE]", frame("b")])
    assert await _fragments(stream, BackgroundExecutor()) == ["a"]  # nosec B101
    assert stream.reads == 2  # nosec B101


@pytest.mark.asyncio
async def test_end_of_body_without_finish_ends_quietly() -> None:
    stream = CountingStream([frame("a"), frame("b")])
    assert await _fragments(stream, BackgroundExecutor()) == ["a", "b"]  # nosec B101


@pytest.mark.asyncio
async def test_malformed_frame_terminates_after_earlier_fragments() -> None:
    stream = CountingStream([frame("a"), "data: {not json", frame("b", "stop")])
    executor = BackgroundExecutor()
    received: List[str] = []
    async with stream_client(stream) as client:
        channel = await stream_completion(API_URL, _request(), executor=executor, client=client)
        with pytest.raises(ProtocolError) as info:
            async for fragment in iter_fragments(channel):
                received.append(fragment)
        await executor.drain()
    assert received == ["a"]  # nosec B101
    assert info.value.code is ErrorCode.PROTOCOL  # nosec B101
    assert info.value.line == "data: {not json"  # nosec B101
    assert stream.reads == 2  # nosec B101


@pytest.mark.asyncio
async def test_read_failure_surfaces_transport_error() -> None:
    stream = CountingStream([frame("a"), frame("b")], fail_after=1)
    executor = BackgroundExecutor()
    received: List[str] = []
    async with stream_client(stream) as client:
        channel = await stream_completion(API_URL, _request(), executor=executor, client=client)
        with pytest.raises(TransportError):
            async for fragment in iter_fragments(channel):
                received.append(fragment)
        await executor.drain()
    assert received == ["a"]  # nosec B101


@pytest.mark.asyncio
async def test_dropping_consumer_stops_further_sends() -> None:
    stream = CountingStream([frame("a"), frame("b"), frame("c"), frame("d", "stop")], gate_after=1)
    executor = BackgroundExecutor()
    async with stream_client(stream) as client:
        channel = await stream_completion(API_URL, _request(), executor=executor, client=client)
        fragments = iter_fragments(channel)
        assert await fragments.__anext__() == "a"  # nosec B101
        await fragments.aclose()
        assert channel.receiver_closed  # nosec B101
        stream.gate.set()
        await executor.drain()
    assert channel.sent == 1  # nosec B101
    assert stream.reads == 2  # nosec B101
    assert stream.closed  # nosec B101


@pytest.mark.asyncio
async def test_dropping_unstarted_fragments_stops_stream() -> None:
    stream = CountingStream([frame(str(i)) for i in range(50)] + [frame("end", "stop")], gate_after=1)
    executor = BackgroundExecutor()
    async with stream_client(stream) as client:
        channel = await stream_completion(API_URL, _request(), executor=executor, client=client)
        fragments = iter_fragments(channel)
        del fragments
        gc.collect()
        assert channel.receiver_closed  # nosec B101
        stream.gate.set()
        await executor.drain()
    assert channel.sent == 0  # nosec B101
    assert stream.reads == 1  # nosec B101
    assert stream.closed  # nosec B101


@pytest.mark.asyncio
async def test_fragments_close_receiver_when_exhausted() -> None:
    async with mock_client(lambda r: httpx.Response(200, content=sse_body([frame("a", "stop")]))) as client:
        executor = BackgroundExecutor()
        fragments = iter_fragments(
            await stream_completion(API_URL, _request(), executor=executor, client=client)
        )
        assert [f async for f in fragments] == ["a"]  # nosec B101
        assert fragments.channel.receiver_closed  # nosec B101
        await executor.drain()


@pytest.mark.asyncio
async def test_structured_error_body_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"message": "bad request"}})

    executor = BackgroundExecutor()
    async with mock_client(handler) as client:
        with pytest.raises(ServerError) as info:
            await stream_completion(API_URL, _request(), executor=executor, client=client)
    assert info.value.message == "bad request"  # nosec B101
    assert info.value.status_code == 400  # nosec B101
    assert info.value.code is ErrorCode.VALIDATION  # nosec B101
    assert executor.pending == 0  # nosec B101


@pytest.mark.asyncio
async def test_opaque_error_body_keeps_status_and_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, content=b"oops")

    async with mock_client(handler) as client:
        with pytest.raises(ServerError) as info:
            await stream_completion(API_URL, _request(), executor=BackgroundExecutor(), client=client)
    assert "500" in info.value.message  # nosec B101
    assert "oops" in info.value.message  # nosec B101
    assert info.value.body == "oops"  # nosec B101
    assert info.value.code is ErrorCode.SERVER_ERROR  # nosec B101


@pytest.mark.asyncio
async def test_empty_structured_message_falls_back_to_raw_body() -> None:
    body = '{"error": {"message": ""}}'

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, content=body.encode())

    async with mock_client(handler) as client:
        with pytest.raises(ServerError) as info:
            await stream_completion(API_URL, _request(), executor=BackgroundExecutor(), client=client)
    assert info.value.message.startswith("429")  # nosec B101
    assert body in info.value.message  # nosec B101
    assert info.value.code is ErrorCode.RATE_LIMIT  # nosec B101
    assert info.value.retryable  # nosec B101


@pytest.mark.asyncio
async def test_connect_failure_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        with pytest.raises(TransportError) as info:
            await stream_completion(
                API_URL,
                _request(),
                executor=BackgroundExecutor(),
                client=client,
                log_context=LogContext(provider="local", model="codellama:7b"),
            )
    assert info.value.code is ErrorCode.TRANSPORT  # nosec B101
    assert info.value.provider == "local"  # nosec B101
    assert "connection refused" in info.value.message  # nosec B101


@pytest.mark.asyncio
async def test_owned_client_is_closed_after_stream(monkeypatch) -> None:
    created: List[httpx.AsyncClient] = []
    real_client = httpx.AsyncClient

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=sse_body([frame("a", "stop")]))

    def factory(**kwargs) -> httpx.AsyncClient:
        client = real_client(transport=httpx.MockTransport(handler), **kwargs)
        created.append(client)
        return client

    monkeypatch.setattr(httpx, "AsyncClient", factory)
    executor = BackgroundExecutor()
    channel = await stream_completion(API_URL, _request(), executor=executor)
    assert await collect_completion(iter_fragments(channel)) == "a"  # nosec B101
    await executor.drain()
    assert len(created) == 1  # nosec B101
    assert created[0].is_closed  # nosec B101


@pytest.mark.asyncio
async def test_owned_client_is_closed_when_send_is_cancelled(monkeypatch) -> None:
    created: List[httpx.AsyncClient] = []
    real_client = httpx.AsyncClient
    entered = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        entered.set()
        await asyncio.Event().wait()
        return httpx.Response(200)

    def factory(**kwargs) -> httpx.AsyncClient:
        client = real_client(transport=httpx.MockTransport(handler), **kwargs)
        created.append(client)
        return client

    monkeypatch.setattr(httpx, "AsyncClient", factory)
    executor = BackgroundExecutor()
    task = asyncio.create_task(stream_completion(API_URL, _request(), executor=executor))
    await entered.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert len(created) == 1  # nosec B101
    assert created[0].is_closed  # nosec B101
    assert executor.pending == 0  # nosec B101


@pytest.mark.asyncio
async def test_concurrent_streams_are_independent() -> None:
    executor = BackgroundExecutor()
    first = CountingStream([frame("1a"), frame("1b", "stop")])
    second = CountingStream([frame("2a"), frame("2b"), frame("2c", "stop")])
    async with stream_client(first) as c1, stream_client(second) as c2:
        ch1 = await stream_completion(API_URL, _request(), executor=executor, client=c1)
        ch2 = await stream_completion(API_URL, _request(), executor=executor, client=c2)
        out2 = await collect_completion(iter_fragments(ch2))
        out1 = await collect_completion(iter_fragments(ch1))
        await executor.drain()
    assert (out1, out2) == ("1a1b", "2a2b2c")  # nosec B101


def test_parse_event_line_variants() -> None:
    assert parse_event_line("") is None  # nosec B101
    assert parse_event_line("data:{}") is None  # nosec B101
    event = parse_event_line(frame("z"))
    assert project_delta(event) == "z"  # nosec B101
    with pytest.raises(ProtocolError):
        parse_event_line('data: {"choices": "nope"}')


@pytest.mark.asyncio
async def test_channel_preserves_order_and_reports_drop() -> None:
    channel: EventChannel[int] = EventChannel()
    for i in range(5):
        assert channel.send(i)  # nosec B101
    channel.close_sender()
    assert [i async for i in channel] == [0, 1, 2, 3, 4]  # nosec B101
    assert not channel.send(5)  # nosec B101

    dropped: EventChannel[int] = EventChannel()
    dropped.send(1)
    await dropped.aclose()
    assert not dropped.send(2)  # nosec B101
    assert [i async for i in dropped] == []  # nosec B101
