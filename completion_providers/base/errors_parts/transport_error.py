"""
Transport failure raised while connecting to or reading from an endpoint.

Wraps ``httpx`` exceptions so callers only ever handle :class:`ProviderError`
subclasses. Timeouts keep their own code; everything else is ``transport``.
"""
from __future__ import annotations

from typing import Optional

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


class TransportError(ProviderError):
    """Connection or I/O failure before or during streaming. Never retried."""

    def __init__(
        self,
        message: str,
        provider: str,
        model: Optional[str] = None,
        raw: Optional[BaseException] = None,
    ) -> None:
        code = ErrorCode.TIMEOUT if isinstance(raw, httpx.TimeoutException) else ErrorCode.TRANSPORT
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            retryable=True,
            raw=raw,
        )

    @classmethod
    def from_httpx(
        cls, exc: httpx.HTTPError, provider: str, model: Optional[str] = None
    ) -> "TransportError":
        """Build a transport error from an ``httpx`` exception."""
        detail = str(exc) or type(exc).__name__
        return cls(message=detail, provider=provider, model=model, raw=exc)


__all__ = ["TransportError"]
