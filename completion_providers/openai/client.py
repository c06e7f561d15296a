"""OpenAI provider adapter.

Purpose:
        Streams chat completions from the OpenAI API over the shared
        chat-completions client, authenticating every request with a bearer
        token.

External dependencies:
        - ``httpx`` through the base streaming client. No SDK is used.

Credentials:
        - Resolved through ``KeysRepository`` (``OPENAI_API_KEY``, then the
          external config file) and cached on a state object shared by clones.
        - A missing key fails ``complete`` with ``ErrorCode.AUTH`` before any
          network I/O.
        - Keys are never logged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..base.completion_parts import BaseCompletionProvider, ProviderInit
from ..base.constants import MISSING_API_KEY_ERROR
from ..base.credentials import ProviderCredential
from ..base.errors import ErrorCode, ProviderError
from ..base.logging import log_event
from ..base.repositories import KeysRepository
from ..config.defaults import OPEN_AI_API_URL, OPENAI_DEFAULT_MODEL
from .model import OpenAiLanguageModel


@dataclass
class _CredentialState:
    api_key: Optional[str] = field(default=None, repr=False)


class OpenAiCompletionProvider(BaseCompletionProvider):
    PROVIDER_NAME = "openai"
    DEFAULT_MODEL = OPENAI_DEFAULT_MODEL
    DEFAULT_API_URL = OPEN_AI_API_URL

    def __init__(self, init: ProviderInit, keys: Optional[KeysRepository] = None) -> None:
        super().__init__(init)
        self._keys = keys or KeysRepository()
        self._credentials = _CredentialState()

    @classmethod
    def load_model(cls, name: str) -> OpenAiLanguageModel:
        return OpenAiLanguageModel.load(name)

    def has_credentials(self) -> bool:
        return bool(self._credentials.api_key or self._keys.get_api_key(self.PROVIDER_NAME))

    async def retrieve_credentials(self) -> ProviderCredential:
        if self._credentials.api_key is None:
            resolution = self._keys.get_resolution(self.PROVIDER_NAME)
            if resolution.api_key:
                self._credentials.api_key = resolution.api_key
                log_event(self._logger, "credentials.resolved", source=resolution.source)
        if self._credentials.api_key:
            return ProviderCredential.from_api_key(self._credentials.api_key)
        return ProviderCredential.no_credentials()

    async def save_credentials(self, credential: ProviderCredential) -> None:
        if credential.kind != "api_key" or not credential.api_key:
            raise ValueError(f"{self.PROVIDER_NAME} requires an api key credential, got {credential.kind!r}")
        self._credentials.api_key = credential.api_key
        self._keys.save_api_key(self.PROVIDER_NAME, credential.api_key)
        log_event(self._logger, "credentials.saved")

    async def delete_credentials(self) -> None:
        self._credentials.api_key = None
        self._keys.delete_api_key(self.PROVIDER_NAME)
        log_event(self._logger, "credentials.deleted")

    async def _request_headers(self) -> Dict[str, str]:
        credential = await self.retrieve_credentials()
        if not credential.api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message=MISSING_API_KEY_ERROR,
                provider=self.PROVIDER_NAME,
                model=self._model.name,
            )
        return {"Authorization": f"Bearer {credential.api_key}"}


__all__ = ["OpenAiCompletionProvider"]
