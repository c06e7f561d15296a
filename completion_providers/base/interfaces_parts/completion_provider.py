"""CompletionProvider Protocol (single-class module).

The uniform capability every provider family exposes: a read-only view of the
bound language model and a streaming ``complete`` call.
"""

from __future__ import annotations

from typing import AsyncIterator, Protocol, runtime_checkable

from ..dto import CompletionRequest
from ..language_model import LanguageModel
from .credential_provider import CredentialProvider


@runtime_checkable
class CompletionProvider(CredentialProvider, Protocol):
    """Streaming completion provider.

    ``complete`` resolves to a finite, forward-only async iterator of text
    fragments. Closing the iterator early stops the underlying stream.
    Failures before streaming starts are raised from ``complete`` itself;
    failures mid-stream are raised from the iterator after every earlier
    fragment.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier used in config and logs."""
        ...

    def base_model(self) -> LanguageModel:
        ...

    async def complete(self, request: CompletionRequest) -> AsyncIterator[str]:
        ...

    def clone(self) -> "CompletionProvider":
        """Duplicate configuration and shared handles without opening connections."""
        ...


__all__ = ["CompletionProvider"]
