"""
Server failure for a non-success HTTP status.

The message is the server-supplied ``error.message`` when one can be
extracted, otherwise the status line followed by the raw body verbatim.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class ServerError(ProviderError):
    """Non-success HTTP status surfaced with the best available message."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int,
        body: str = "",
        code: ErrorCode = ErrorCode.SERVER_ERROR,
        model: Optional[str] = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            retryable=code in (ErrorCode.RATE_LIMIT, ErrorCode.UNAVAILABLE, ErrorCode.TIMEOUT),
        )
        self.status_code = status_code
        self.body = body


__all__ = ["ServerError"]
