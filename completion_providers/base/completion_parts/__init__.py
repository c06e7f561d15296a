"""Shared provider implementation parts."""

from .provider_init import ProviderInit
from .base import BaseCompletionProvider

__all__ = ["ProviderInit", "BaseCompletionProvider"]
