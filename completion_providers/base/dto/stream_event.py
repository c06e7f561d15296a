"""
Pydantic DTOs for the incremental streaming response.

Each ``data: `` line of a successful response decodes into one
:class:`StreamEvent`. A delta may carry only a role, only content, or neither
(typically on the final frame), so both fields are optional. Unknown fields are
ignored so servers may echo extra metadata.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .role import Role


class ResponseMessage(BaseModel):
    """Partial message carried by a streamed choice."""

    role: Optional[Role] = None
    content: Optional[str] = None


class Usage(BaseModel):
    """Advisory token counters; never required for correctness."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatChoiceDelta(BaseModel):
    index: int = 0
    delta: ResponseMessage = Field(default_factory=ResponseMessage)
    finish_reason: Optional[str] = None


class StreamEvent(BaseModel):
    """One decoded server-sent-event frame."""

    id: Optional[str] = None
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatChoiceDelta] = Field(default_factory=list)
    usage: Optional[Usage] = None

    @property
    def last_choice(self) -> Optional[ChatChoiceDelta]:
        return self.choices[-1] if self.choices else None

    def is_finished(self) -> bool:
        """True when the last choice carries a non-empty finish reason."""
        choice = self.last_choice
        return bool(choice is not None and choice.finish_reason)


__all__ = ["ResponseMessage", "Usage", "ChatChoiceDelta", "StreamEvent"]
