"""
Cloud language model: model-specific vocabulary and a fixed context table.
"""

from __future__ import annotations

import logging

from ..base.errors import CapacityError, TokenizerError
from ..base.language_model import BpeLanguageModel
from ..base.logging import get_logger, log_event
from ..base.tokens import load_tokenizer
from .context_limits import DEFAULT_CONTEXT_LIMIT, lookup_context_limit

_logger = get_logger("completion.openai.model")


class OpenAiLanguageModel(BpeLanguageModel):
    @classmethod
    def load(cls, name: str) -> "OpenAiLanguageModel":
        """Load the vocabulary registered for ``name`` (``cl100k_base`` if none)."""
        try:
            tokenizer = load_tokenizer(name)
        except TokenizerError as exc:
            log_event(_logger, "model.tokenizer_unavailable", level=logging.WARNING, model=name, error=exc.message)
            tokenizer = None
        return cls(name, tokenizer)

    def capacity(self) -> int:
        if not self.name:
            raise CapacityError("model name is empty", provider="openai")
        limit = lookup_context_limit(self.name)
        if limit is None:
            log_event(
                _logger,
                "model.unknown_context_limit",
                level=logging.WARNING,
                model=self.name,
                default=DEFAULT_CONTEXT_LIMIT,
            )
            return DEFAULT_CONTEXT_LIMIT
        return limit


__all__ = ["OpenAiLanguageModel"]
