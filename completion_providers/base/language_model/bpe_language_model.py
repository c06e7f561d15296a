"""
Shared implementation of :class:`LanguageModel` over a BPE tokenizer.

Provider packages subclass this and supply ``capacity`` plus a ``load``
classmethod choosing the vocabulary. The tokenizer is optional so a model can
still be named and sized when no vocabulary resolved; count and truncate then
raise :class:`TokenizerError` rather than guessing.
"""

from __future__ import annotations

from typing import Optional

from ..errors import TokenizerError
from ..tokens import BpeTokenizer
from .truncation_direction import TruncationDirection


class BpeLanguageModel:
    """Language model whose token accounting is delegated to a ``BpeTokenizer``."""

    def __init__(self, name: str, tokenizer: Optional[BpeTokenizer]) -> None:
        self._name = name
        self._tokenizer = tokenizer

    @property
    def name(self) -> str:
        return self._name

    @property
    def tokenizer(self) -> BpeTokenizer:
        if self._tokenizer is None:
            raise TokenizerError(f"no tokenizer available for model {self._name!r}", model=self._name)
        return self._tokenizer

    def count_tokens(self, content: str) -> int:
        return self.tokenizer.count(content)

    def truncate(self, content: str, length: int, direction: TruncationDirection) -> str:
        if length < 0:
            raise ValueError(f"truncation length must be non-negative, got {length}")
        tokenizer = self.tokenizer
        tokens = tokenizer.encode(content)
        if len(tokens) > length:
            if direction is TruncationDirection.END:
                tokens = tokens[:length]
            else:
                tokens = tokens[len(tokens) - length:]
        return tokenizer.decode(tokens)

    def capacity(self) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


__all__ = ["BpeLanguageModel"]
