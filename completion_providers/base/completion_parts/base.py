"""
Shared base for providers speaking the chat completions streaming protocol.

Purpose
-------
Bind a loaded :class:`LanguageModel`, a base URL and a shared execution
capability, and expose ``complete`` over the streaming client. Subclasses
supply the provider key, the defaults used by ``create``, the model loader,
the credential methods and any per-request headers.

External dependencies
---------------------
- ``httpx`` through :func:`stream_completion`.
- The layered configuration (``get_provider_config``) for ``create``.

Failure semantics
-----------------
- ``create`` surfaces :class:`TokenizerError` only through the loader; the
  built-in loaders degrade to a model without a tokenizer instead.
- ``complete`` raises :class:`TransportError` or :class:`ServerError` before
  streaming starts, and the returned iterator raises :class:`ProtocolError`
  or :class:`TransportError` after any fragments already delivered.
"""

from __future__ import annotations

import copy
from typing import Any, ClassVar, Dict, Optional, Type, TypeVar

import httpx

from ...config import get_provider_config
from ..credentials import ProviderCredential
from ..dto import CompletionRequest
from ..execution import BackgroundExecutor
from ..interfaces_parts.spawner import Spawner
from ..language_model import LanguageModel, LanguageModelCache
from ..log_support import LogContext
from ..logging import get_logger
from ..streaming import FragmentStream, iter_fragments, stream_completion
from .provider_init import ProviderInit

P = TypeVar("P", bound="BaseCompletionProvider")


def _coerce_non_empty_str(candidate: Any, fallback: str) -> str:
    """Return a stripped string derived from ``candidate`` or ``fallback`` when empty."""
    if candidate is None:
        return fallback
    coerced = str(candidate).strip()
    return coerced or fallback


class BaseCompletionProvider:
    """Common ``CompletionProvider`` implementation."""

    PROVIDER_NAME: ClassVar[str] = ""
    DEFAULT_MODEL: ClassVar[str] = ""
    DEFAULT_API_URL: ClassVar[str] = ""

    def __init__(self, init: ProviderInit) -> None:
        self._api_url = init.api_url
        self._model = init.model
        self._executor = init.executor
        self._client = init.client
        self._logger = get_logger(f"completion.{self.PROVIDER_NAME}")

    @classmethod
    async def create(
        cls: Type[P],
        api_url: Optional[str] = None,
        model_name: Optional[str] = None,
        executor: Optional[Spawner] = None,
        *,
        cache: Optional[LanguageModelCache] = None,
        client: Optional[httpx.AsyncClient] = None,
        **kwargs: Any,
    ) -> P:
        """Resolve configuration, load the model off the event loop and build the provider.

        Parameters
        ----------
        api_url, model_name:
            Explicit overrides; otherwise resolved from defaults, the config
            file and ``<PROVIDER>_BASE_URL`` / ``<PROVIDER>_MODEL``.
        executor:
            Shared execution capability; a new ``BackgroundExecutor`` if omitted.
        cache:
            Model cache to reuse a model already loaded under the same name.
        client:
            Optional shared HTTP client.
        """
        cfg = get_provider_config(cls.PROVIDER_NAME, overrides={"base_url": api_url, "model": model_name})
        name = _coerce_non_empty_str(cfg.get("model"), cls.DEFAULT_MODEL)
        url = _coerce_non_empty_str(cfg.get("base_url"), cls.DEFAULT_API_URL)
        cache = cache if cache is not None else LanguageModelCache()
        model = await cache.aget_or_load(name, cls.load_model)
        init = ProviderInit(
            api_url=url,
            model=model,
            executor=executor if executor is not None else BackgroundExecutor(),
            client=client,
        )
        return cls(init, **kwargs)

    @classmethod
    def load_model(cls, name: str) -> LanguageModel:
        """Build the language model for ``name``; runs in a worker thread."""
        raise NotImplementedError

    @property
    def provider_name(self) -> str:
        return self.PROVIDER_NAME

    @property
    def api_url(self) -> str:
        return self._api_url

    def base_model(self) -> LanguageModel:
        return self._model

    def clone(self: P) -> P:
        return copy.copy(self)

    async def _request_headers(self) -> Dict[str, str]:
        return {}

    async def complete(self, request: CompletionRequest) -> FragmentStream:
        """Start a streaming completion and return its fragment iterator."""
        headers = await self._request_headers()
        channel = await stream_completion(
            self._api_url,
            request,
            executor=self._executor,
            client=self._client,
            headers=headers,
            log_context=LogContext(provider=self.PROVIDER_NAME, model=request.model),
        )
        return iter_fragments(channel)

    def has_credentials(self) -> bool:
        raise NotImplementedError

    async def retrieve_credentials(self) -> ProviderCredential:
        raise NotImplementedError

    async def save_credentials(self, credential: ProviderCredential) -> None:
        raise NotImplementedError

    async def delete_credentials(self) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_url={self._api_url!r}, model={self._model.name!r})"


__all__ = ["BaseCompletionProvider"]
