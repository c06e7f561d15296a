"""
Byte-pair-encoding tokenizer adapter.

Purpose
-------
Wrap a ``tiktoken.Encoding`` behind a small encode/decode/count surface used
by language models for context-window accounting.

External dependencies
---------------------
- ``tiktoken`` for the vocabularies. Resolving a vocabulary may read from the
  tiktoken disk cache or download it, so callers on an event loop should load
  through ``asyncio.to_thread``.

Failure semantics
-----------------
- ``encode`` is total over text: special tokens are encoded as such rather
  than rejected.
- ``decode`` is strict: unknown ids or byte sequences that are not valid UTF-8
  raise :class:`DecodeError`.
- ``load_tokenizer`` raises :class:`TokenizerError` only when neither the
  model vocabulary nor the fallback vocabulary can be resolved.
"""
from __future__ import annotations

from typing import List, Sequence

import tiktoken

from ..errors import DecodeError, TokenizerError
from ..logging import get_logger, log_event

DEFAULT_ENCODING = "cl100k_base"

_logger = get_logger("completion.tokenizer")


class BpeTokenizer:
    """Encode, decode and count tokens with one fixed vocabulary."""

    def __init__(self, encoding: tiktoken.Encoding) -> None:
        self._encoding = encoding

    @property
    def encoding_name(self) -> str:
        return self._encoding.name

    def encode(self, text: str) -> List[int]:
        return self._encoding.encode(text, allowed_special="all")

    def decode(self, tokens: Sequence[int]) -> str:
        try:
            data = self._encoding.decode_bytes(list(tokens))
        except (KeyError, ValueError, OverflowError) as exc:
            raise DecodeError(f"unknown token id in sequence: {exc}", raw=exc) from exc
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError("token sequence is not valid UTF-8", raw=exc) from exc

    def count(self, text: str) -> int:
        return len(self.encode(text))


def load_tokenizer(model_name: str, fallback: str = DEFAULT_ENCODING) -> BpeTokenizer:
    """Resolve the vocabulary for ``model_name``, falling back to ``fallback``.

    Parameters
    ----------
    model_name:
        Model identifier understood by ``tiktoken.encoding_for_model``.
    fallback:
        Encoding name used when the model has no registered vocabulary.

    Returns
    -------
    BpeTokenizer
        Adapter bound to the resolved encoding.

    Raises
    ------
    TokenizerError
        When the fallback encoding cannot be loaded either.
    """
    try:
        return BpeTokenizer(tiktoken.encoding_for_model(model_name))
    except (KeyError, ValueError, OSError) as exc:
        log_event(_logger, "tokenizer.fallback", model=model_name, encoding=fallback, reason=repr(exc))
    try:
        return BpeTokenizer(tiktoken.get_encoding(fallback))
    except (KeyError, ValueError, OSError) as exc:
        raise TokenizerError(
            f"no vocabulary for {model_name!r} and fallback {fallback!r} unavailable: {exc}",
            model=model_name,
            raw=exc,
        ) from exc


__all__ = ["BpeTokenizer", "load_tokenizer", "DEFAULT_ENCODING"]
