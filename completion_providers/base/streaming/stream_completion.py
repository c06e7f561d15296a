"""
Streaming chat completions client.

Purpose
-------
Issue ``POST {api_url}/chat/completions`` with a serialized
:class:`CompletionRequest`, then decode the line-oriented event stream into
:class:`StreamEvent` items forwarded through an :class:`EventChannel`.

States
------
``AwaitingResponse`` runs in the caller: send the request and branch on the
status. A non-success status reads the whole body and raises
:class:`ServerError`. A success status spawns the decode loop on the executor
and returns the channel immediately. The loop then:

- skips lines that do not start with ``"data: "`` (blank keep-alives, comments)
- parses each payload as one event and forwards it
- ends after forwarding an event whose last choice has a finish reason, or on
  ``data: [DONE]`` (``done``)
- ends when a send reports the receiver dropped (``aborted``)
- ends when the body is exhausted (``eof``)
- forwards a read or decode failure as a final error item (``error``)

The response, and the HTTP client when this module created it, are closed in
every case.

External dependencies
---------------------
- ``httpx.AsyncClient``. No timeout is applied to the stream; a stalled
  transport stalls the stream until the caller bounds it.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from ..constants import DATA_PREFIX, DEFAULT_STREAM_HTTP_TIMEOUT, DONE_SENTINEL
from ..dto import CompletionRequest, ErrorBody, StreamEvent
from ..errors import (
    ProtocolError,
    ProviderError,
    ServerError,
    TransportError,
    code_for_status,
)
from ..interfaces_parts.spawner import Spawner
from ..log_support import LogContext
from ..logging import get_logger, normalized_log_event
from .channel import EventChannel

StreamItem = Union[StreamEvent, ProviderError]

_logger = get_logger("completion.streaming")

_DONE: Any = object()


def completions_url(api_url: str) -> str:
    return f"{api_url.rstrip('/')}/chat/completions"


def parse_event_line(line: str, provider: str = "unknown", model: Optional[str] = None) -> Any:
    """Decode one body line.

    Returns ``None`` for lines to skip, a ``_DONE`` marker for ``[DONE]``,
    otherwise the decoded :class:`StreamEvent`.

    Raises
    ------
    ProtocolError
        When the payload is not a valid event.
    """
    if not line.startswith(DATA_PREFIX):
        return None
    payload = line[len(DATA_PREFIX):]
    if payload.strip() == DONE_SENTINEL:
        return _DONE
    try:
        return StreamEvent.model_validate_json(payload)
    except ValidationError as exc:
        raise ProtocolError(
            message=f"malformed stream frame: {exc.errors()[0]['msg'] if exc.errors() else exc}",
            provider=provider,
            model=model,
            raw=exc,
            line=line,
        ) from exc


def server_error_from_body(
    status_code: int,
    reason: str,
    body: str,
    provider: str,
    model: Optional[str] = None,
) -> ServerError:
    """Build the error for a non-success response.

    Uses the structured ``error.message`` when present and non-empty,
    otherwise the status line and the raw body verbatim.
    """
    message = ErrorBody.extract_message(body)
    if message is None:
        message = " ".join(part for part in (str(status_code), reason, body) if part)
    return ServerError(
        message=message,
        provider=provider,
        status_code=status_code,
        body=body,
        code=code_for_status(status_code),
        model=model,
    )


async def stream_completion(
    api_url: str,
    request: CompletionRequest,
    *,
    executor: Spawner,
    client: Optional[httpx.AsyncClient] = None,
    headers: Optional[Mapping[str, str]] = None,
    log_context: Optional[LogContext] = None,
) -> EventChannel[StreamItem]:
    """Start a streaming completion and return the channel of decoded items.

    Parameters
    ----------
    api_url:
        Provider base URL, e.g. ``http://localhost:11434/v1``.
    request:
        Request to serialize as the JSON body.
    executor:
        Capability used to run the decode loop in the background.
    client:
        Optional shared client. When omitted a client is created for this call
        and closed when the stream ends.
    headers:
        Extra headers (e.g. ``Authorization``) merged over the JSON content type.
    log_context:
        Provider/model context attached to every log event.

    Raises
    ------
    TransportError
        The request could not be sent or the error body could not be read.
    ServerError
        The server answered with a non-success status.
    """
    ctx = log_context or LogContext(model=request.model)
    provider = ctx.provider or "unknown"
    owned = client is None
    http = client if client is not None else httpx.AsyncClient(timeout=DEFAULT_STREAM_HTTP_TIMEOUT)
    url = completions_url(api_url)
    req_headers: Dict[str, str] = {"Content-Type": "application/json"}
    req_headers.update(headers or {})

    normalized_log_event(_logger, "stream.start", ctx, phase="start", attempt=1, emitted=False, url=url)
    try:
        response = await http.send(
            http.build_request("POST", url, content=request.data(), headers=req_headers),
            stream=True,
        )
    except httpx.HTTPError as exc:
        if owned:
            await http.aclose()
        error = TransportError.from_httpx(exc, provider, request.model)
        normalized_log_event(
            _logger,
            "stream.transport_error",
            ctx,
            phase="start",
            error_code=error.code.value,
            emitted=False,
            level=logging.WARNING,
            error=error.message,
        )
        raise error from exc
    except BaseException:
        if owned:
            await http.aclose()
        raise

    if not response.is_success:
        try:
            body = (await response.aread()).decode("utf-8", errors="replace")
        except httpx.HTTPError as exc:
            raise TransportError.from_httpx(exc, provider, request.model) from exc
        finally:
            await response.aclose()
            if owned:
                await http.aclose()
        error = server_error_from_body(
            response.status_code, response.reason_phrase, body, provider, request.model
        )
        normalized_log_event(
            _logger,
            "stream.error_body",
            ctx,
            phase="start",
            error_code=error.code.value,
            emitted=False,
            level=logging.WARNING,
            status=response.status_code,
        )
        raise error

    channel: EventChannel[StreamItem] = EventChannel()
    executor.spawn(
        _decode_loop(response, channel, ctx, http if owned else None, provider, request.model),
        name=f"stream:{provider}:{request.model}",
    )
    return channel


async def _decode_loop(
    response: httpx.Response,
    channel: EventChannel[StreamItem],
    ctx: LogContext,
    owned_client: Optional[httpx.AsyncClient],
    provider: str,
    model: str,
) -> None:
    outcome = "eof"
    error_code: Optional[str] = None
    forwarded = 0
    usage = None
    try:
        async for line in response.aiter_lines():
            event = parse_event_line(line, provider, model)
            if event is None:
                continue
            if event is _DONE:
                outcome = "done"
                break
            if not channel.send(event):
                outcome = "aborted"
                normalized_log_event(_logger, "stream.abort", ctx, phase="abort", emitted=forwarded > 0)
                break
            forwarded += 1
            if event.usage is not None:
                usage = event.usage
            if event.is_finished():
                outcome = "done"
                break
    except ProtocolError as exc:
        outcome, error_code = "error", exc.code.value
        normalized_log_event(
            _logger,
            "stream.decode_error",
            ctx,
            phase="stream",
            error_code=error_code,
            emitted=forwarded > 0,
            level=logging.WARNING,
            error=exc.message,
        )
        channel.send(exc)
    except httpx.HTTPError as exc:
        error = TransportError.from_httpx(exc, provider, model)
        outcome, error_code = "error", error.code.value
        normalized_log_event(
            _logger,
            "stream.transport_error",
            ctx,
            phase="stream",
            error_code=error_code,
            emitted=forwarded > 0,
            level=logging.WARNING,
            error=error.message,
        )
        channel.send(error)
    finally:
        channel.close_sender()
        await response.aclose()
        if owned_client is not None:
            await owned_client.aclose()
        normalized_log_event(
            _logger,
            "stream.end",
            ctx,
            phase="finalize",
            error_code=error_code,
            emitted=forwarded > 0,
            tokens=usage,
            outcome=outcome,
            forwarded=forwarded,
        )


__all__ = [
    "StreamItem",
    "stream_completion",
    "parse_event_line",
    "server_error_from_body",
    "completions_url",
]
