"""Initialization dataclass for completion providers.

Encapsulates the constructor parameters shared by every
``BaseCompletionProvider`` subclass. Pure data container; no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from ..interfaces_parts.spawner import Spawner
from ..language_model import LanguageModel


@dataclass(frozen=True)
class ProviderInit:
    """Initialization bundle for ``BaseCompletionProvider``.

    Attributes:
        api_url: Base URL of the chat completions API.
        model: Loaded language model bound to the provider.
        executor: Shared background execution capability.
        client: Optional shared ``httpx.AsyncClient``; when ``None`` every
            completion opens and closes its own client.
    """

    api_url: str
    model: LanguageModel
    executor: Spawner
    client: Optional[httpx.AsyncClient] = None


__all__ = ["ProviderInit"]
