"""Model catalog: provider families, model variants and provider selection."""

from .ai_provider import AiProvider
from .open_ai_model import OpenAiModel
from .ollama_model import OllamaModel
from .model_variant import (
    AiModelVariant,
    cycle,
    full_name,
    parse_variant,
    provider_of,
    short_name,
)
from .provider_selection import ProviderSelection

__all__ = [
    "AiProvider",
    "OpenAiModel",
    "OllamaModel",
    "AiModelVariant",
    "cycle",
    "full_name",
    "parse_variant",
    "provider_of",
    "short_name",
    "ProviderSelection",
]
