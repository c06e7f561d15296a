"""
Local language model.

No native tokenizer is available for local models, so token accounting
borrows the closest cloud vocabulary and capacity is a fixed estimate of 80%
of an assumed 100k ceiling. Both are approximations; treat capacity as a soft
bound.
"""

from __future__ import annotations

import logging

from ..base.errors import TokenizerError
from ..base.language_model import BpeLanguageModel
from ..base.logging import get_logger, log_event
from ..base.tokens import load_tokenizer

BORROWED_VOCABULARY_MODEL = "gpt-3.5-turbo-0613"
ASSUMED_CONTEXT_CEILING = 100_000
CAPACITY_FRACTION = 0.8

_logger = get_logger("completion.ollama.model")


class OllamaLanguageModel(BpeLanguageModel):
    @classmethod
    def load(cls, name: str) -> "OllamaLanguageModel":
        try:
            tokenizer = load_tokenizer(BORROWED_VOCABULARY_MODEL)
        except TokenizerError as exc:
            log_event(_logger, "model.tokenizer_unavailable", level=logging.WARNING, model=name, error=exc.message)
            tokenizer = None
        return cls(name, tokenizer)

    def capacity(self) -> int:
        return int(ASSUMED_CONTEXT_CEILING * CAPACITY_FRACTION)


__all__ = [
    "OllamaLanguageModel",
    "BORROWED_VOCABULARY_MODEL",
    "ASSUMED_CONTEXT_CEILING",
    "CAPACITY_FRACTION",
]
