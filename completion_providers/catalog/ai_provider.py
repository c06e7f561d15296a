"""Provider family tag with its display name, default model and default URL."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ..config.defaults import OLLAMA_API_URL, OPEN_AI_API_URL

if TYPE_CHECKING:
    from .model_variant import AiModelVariant


class AiProvider(str, Enum):
    """Closed set of provider families; the value is the config/factory key."""

    OPENAI = "openai"
    OLLAMA = "ollama"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def cycle(self) -> "AiProvider":
        members = list(AiProvider)
        return members[(members.index(self) + 1) % len(members)]

    def default_model(self) -> "AiModelVariant":
        from .ollama_model import OllamaModel
        from .open_ai_model import OpenAiModel

        if self is AiProvider.OPENAI:
            return OpenAiModel.THREE_POINT_FIVE_TURBO
        return OllamaModel.CODE_LLAMA_7B

    def default_api_url(self) -> str:
        return OPEN_AI_API_URL if self is AiProvider.OPENAI else OLLAMA_API_URL


_DISPLAY_NAMES = {
    AiProvider.OPENAI: "Open AI",
    AiProvider.OLLAMA: "Ollama",
}


__all__ = ["AiProvider"]
