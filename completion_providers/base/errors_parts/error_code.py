"""
Normalized completion error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the streaming client, the
tokenizer layer, and provider adapters. Values are lowercase snake_case and are
considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    TOKENIZER = "tokenizer"
    CAPACITY = "capacity"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
