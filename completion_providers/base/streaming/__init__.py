"""Streaming completion client public surface."""

from .channel import EventChannel
from .stream_completion import (
    StreamItem,
    completions_url,
    parse_event_line,
    server_error_from_body,
    stream_completion,
)
from .projection import FragmentStream, collect_completion, iter_fragments, project_delta

__all__ = [
    "EventChannel",
    "StreamItem",
    "completions_url",
    "parse_event_line",
    "server_error_from_body",
    "stream_completion",
    "FragmentStream",
    "collect_completion",
    "iter_fragments",
    "project_delta",
]
