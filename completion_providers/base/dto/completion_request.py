"""
Pydantic DTOs for the outbound chat completion request.

Purpose
-------
Define the request body sent as ``POST {base_url}/chat/completions``. Field
names are the wire names (``model``, ``messages``, ``stream``, ``stop``,
``temperature``). Message order is conversation order and is preserved
exactly through serialization.

External dependencies: Pydantic only. No I/O.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .role import Role


class RequestMessage(BaseModel):
    """One role-tagged message in an outbound request."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class CompletionRequest(BaseModel):
    """Chat-style streaming completion request.

    ``model`` is the on-wire model identifier and is sent verbatim. ``stream``
    defaults to ``True``; this protocol only ever streams.
    """

    model: str
    messages: List[RequestMessage] = Field(default_factory=list)
    stream: bool = True
    stop: List[str] = Field(default_factory=list)
    temperature: float = 1.0

    def data(self) -> str:
        """Serialize the request to the single JSON object sent as the body."""
        return self.model_dump_json()


__all__ = ["RequestMessage", "CompletionRequest"]
