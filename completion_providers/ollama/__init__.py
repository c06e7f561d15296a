"""Ollama provider package."""

from .client import OllamaCompletionProvider
from .model import OllamaLanguageModel

__all__ = ["OllamaCompletionProvider", "OllamaLanguageModel"]
