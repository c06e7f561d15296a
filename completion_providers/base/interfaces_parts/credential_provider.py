"""CredentialProvider Protocol (single-class module).

Defines how a provider reports, fetches and stores its credential. Local
providers answer with a "not needed" credential.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..credentials import ProviderCredential


@runtime_checkable
class CredentialProvider(Protocol):
    def has_credentials(self) -> bool:
        """Return True when ``retrieve_credentials`` would yield a usable credential."""
        ...

    async def retrieve_credentials(self) -> ProviderCredential:
        ...

    async def save_credentials(self, credential: ProviderCredential) -> None:
        ...

    async def delete_credentials(self) -> None:
        ...


__all__ = ["CredentialProvider"]
