"""Ollama provider adapter.

Purpose:
        Streams chat completions from a local Ollama daemon through its
        OpenAI-compatible endpoint (default ``http://localhost:11434/v1``).

External dependencies:
        - ``httpx`` through the base streaming client. No API key is required
          since Ollama is a local daemon; credentials are always "not needed".
"""

from __future__ import annotations

from ..base.completion_parts import BaseCompletionProvider
from ..base.credentials import ProviderCredential
from ..config.defaults import OLLAMA_API_URL, OLLAMA_DEFAULT_MODEL
from .model import OllamaLanguageModel


class OllamaCompletionProvider(BaseCompletionProvider):
    PROVIDER_NAME = "ollama"
    DEFAULT_MODEL = OLLAMA_DEFAULT_MODEL
    DEFAULT_API_URL = OLLAMA_API_URL

    @classmethod
    def load_model(cls, name: str) -> OllamaLanguageModel:
        return OllamaLanguageModel.load(name)

    def has_credentials(self) -> bool:
        return True

    async def retrieve_credentials(self) -> ProviderCredential:
        return ProviderCredential.not_needed()

    async def save_credentials(self, credential: ProviderCredential) -> None:
        return None

    async def delete_credentials(self) -> None:
        return None


__all__ = ["OllamaCompletionProvider"]
