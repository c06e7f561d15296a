"""Structured logging context object for completion calls.

Carries the provider key, model name and request/response ids shared by every
event a single completion emits. ``to_dict`` merges ``extra`` and prunes
``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for completion logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}

    def with_response_id(self, response_id: Optional[str]) -> "LogContext":
        """Return a copy bound to the server-assigned completion id."""
        return replace(self, response_id=response_id, extra=dict(self.extra))


__all__ = ["LogContext"]
