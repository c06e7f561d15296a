"""Decode failure for token ids that do not form valid UTF-8 text."""
from __future__ import annotations

from .tokenizer_error import TokenizerError


class DecodeError(TokenizerError):
    """Token sequence contains unknown ids or splits a multi-byte character."""


__all__ = ["DecodeError"]
