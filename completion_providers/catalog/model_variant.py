"""
Tagged union over every provider's model variants.

The helpers here dispatch over the closed set with ``isinstance`` and raise
``TypeError`` for anything else, so adding a provider family means adding a
branch to each of them.
"""

from __future__ import annotations

from typing import Optional, Union

from .ai_provider import AiProvider
from .ollama_model import OllamaModel
from .open_ai_model import OpenAiModel

AiModelVariant = Union[OpenAiModel, OllamaModel]


def _unsupported(variant: object) -> TypeError:
    return TypeError(f"not a model variant: {variant!r}")


def provider_of(variant: AiModelVariant) -> AiProvider:
    if isinstance(variant, OpenAiModel):
        return AiProvider.OPENAI
    if isinstance(variant, OllamaModel):
        return AiProvider.OLLAMA
    raise _unsupported(variant)


def full_name(variant: AiModelVariant) -> str:
    if isinstance(variant, (OpenAiModel, OllamaModel)):
        return variant.full_name
    raise _unsupported(variant)


def short_name(variant: AiModelVariant) -> str:
    if isinstance(variant, (OpenAiModel, OllamaModel)):
        return variant.short_name
    raise _unsupported(variant)


def cycle(variant: AiModelVariant) -> AiModelVariant:
    """Next variant within the same provider family; wraps at the end."""
    if isinstance(variant, (OpenAiModel, OllamaModel)):
        return variant.cycle()
    raise _unsupported(variant)


def parse_variant(name: str) -> Optional[AiModelVariant]:
    """Resolve an on-wire full name to its variant, or ``None`` if unknown."""
    for family in (OpenAiModel, OllamaModel):
        try:
            return family(name)
        except ValueError:
            continue
    return None


__all__ = [
    "AiModelVariant",
    "provider_of",
    "full_name",
    "short_name",
    "cycle",
    "parse_variant",
]
