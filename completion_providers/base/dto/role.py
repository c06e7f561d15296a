"""Conversation role enumeration shared by requests and streamed deltas."""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Message author role; serialized on the wire as its lowercase value."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"

    @property
    def display_name(self) -> str:
        """Capitalized label for UI surfaces (``"User"``, ``"Assistant"``, ``"System"``)."""
        return self.value.capitalize()

    def cycle(self) -> "Role":
        """Return the next role: user -> assistant -> system -> user."""
        return _ROLE_CYCLE[self]


_ROLE_CYCLE = {
    Role.USER: Role.ASSISTANT,
    Role.ASSISTANT: Role.SYSTEM,
    Role.SYSTEM: Role.USER,
}


__all__ = ["Role"]
