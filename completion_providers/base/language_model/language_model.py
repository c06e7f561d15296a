"""LanguageModel Protocol (single-class module).

Defines the token-accounting contract a completion provider exposes through
``base_model()`` so callers can plan prompts against the context window
before issuing a request.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .truncation_direction import TruncationDirection


@runtime_checkable
class LanguageModel(Protocol):
    """Token counting, truncation and capacity for one loaded model."""

    @property
    def name(self) -> str:
        """Identifier the model was loaded with; any string, not only catalog names."""
        ...

    def count_tokens(self, content: str) -> int:
        """Return the encoded length of ``content``.

        Raises ``TokenizerError`` when no tokenizer was resolved at load time.
        """
        ...

    def truncate(self, content: str, length: int, direction: TruncationDirection) -> str:
        """Return ``content`` cut to at most ``length`` tokens.

        Text always round-trips through the tokenizer, even when nothing is cut.
        """
        ...

    def capacity(self) -> int:
        """Usable context window in tokens. A soft bound for local models."""
        ...


__all__ = ["LanguageModel"]
