"""Provider Factory utilities.

Purpose
-------
Create ready-to-use completion providers from a validated
:class:`ProviderSelection`. Adapters are imported lazily using ``importlib``
so only the selected provider's package is loaded.

Ownership
---------
A factory owns one :class:`BackgroundExecutor` and one
:class:`LanguageModelCache`. Every provider it creates shares both, so a model
is loaded once per name however many providers use it.

Failure semantics
-----------------
No retries or fallbacks; the factory either returns an instance or raises
:class:`UnknownProviderError` (lookup/import problems) or the provider's own
error (e.g. :class:`TokenizerError` from a custom loader).
"""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Optional, Tuple, Type

import httpx

from .base.completion_parts import BaseCompletionProvider
from .base.execution import BackgroundExecutor
from .base.interfaces_parts.spawner import Spawner
from .base.language_model import LanguageModelCache
from .base.logging import get_logger, log_event
from .catalog import AiProvider, ProviderSelection


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or its adapter cannot be imported."""


class ProviderFactory:
    """Create provider adapters from a provider selection."""

    _PROVIDERS: Dict[AiProvider, Dict[str, str]] = {
        AiProvider.OPENAI: {"module": "completion_providers.openai.client", "class": "OpenAiCompletionProvider"},
        AiProvider.OLLAMA: {"module": "completion_providers.ollama.client", "class": "OllamaCompletionProvider"},
    }

    def __init__(
        self,
        executor: Optional[Spawner] = None,
        cache: Optional[LanguageModelCache] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.executor = executor if executor is not None else BackgroundExecutor()
        self.cache = cache if cache is not None else LanguageModelCache()
        self._client = client
        self._logger = get_logger("completion.factory")

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        return tuple(p.value for p in cls._PROVIDERS)

    @classmethod
    def resolve_class(cls, provider: AiProvider | str) -> Type[BaseCompletionProvider]:
        """Import and return the adapter class for ``provider``.

        Raises
        ------
        UnknownProviderError
            Unknown provider, import failure, or missing class.
        """
        try:
            kind = AiProvider(provider)
        except ValueError as exc:
            raise UnknownProviderError(
                f"unknown provider {provider!r}; supported: {', '.join(cls.supported())}"
            ) from exc
        spec = cls._PROVIDERS[kind]
        try:
            module = import_module(spec["module"])
        except ImportError as exc:
            raise UnknownProviderError(f"failed to import {spec['module']}: {exc}") from exc
        adapter = getattr(module, spec["class"], None)
        if adapter is None:
            raise UnknownProviderError(f"{spec['module']} has no class {spec['class']}")
        return adapter

    async def create(self, selection: ProviderSelection) -> BaseCompletionProvider:
        adapter = self.resolve_class(selection.provider)
        provider = await adapter.create(
            api_url=selection.api_url,
            model_name=selection.model.value,
            executor=self.executor,
            cache=self.cache,
            client=self._client,
        )
        log_event(
            self._logger,
            "provider.create",
            provider=selection.provider.value,
            model=selection.model.value,
            api_url=selection.api_url,
        )
        return provider


async def create_provider(
    selection: Optional[ProviderSelection] = None,
    factory: Optional[ProviderFactory] = None,
) -> BaseCompletionProvider:
    """Create a provider for ``selection`` (or the configured selection when omitted)."""
    if selection is None:
        from .config import get_provider_selection

        selection = get_provider_selection()
    return await (factory or ProviderFactory()).create(selection)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
