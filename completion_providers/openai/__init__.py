"""OpenAI provider package."""

from .client import OpenAiCompletionProvider
from .model import OpenAiLanguageModel

__all__ = ["OpenAiCompletionProvider", "OpenAiLanguageModel"]
