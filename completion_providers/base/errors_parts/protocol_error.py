"""
Protocol failure for a malformed stream frame.

A single bad ``data:`` payload terminates the stream; there is no attempt to
resynchronize.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class ProtocolError(ProviderError):
    """Undecodable JSON or a payload that does not match the event schema."""

    def __init__(
        self,
        message: str,
        provider: str,
        model: Optional[str] = None,
        raw: Optional[BaseException] = None,
        line: Optional[str] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PROTOCOL,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )
        self.line = line


__all__ = ["ProtocolError"]
