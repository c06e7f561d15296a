"""Credential value handed between providers and their credential stores."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

CredentialKind = Literal["no_credentials", "not_needed", "api_key"]


@dataclass(frozen=True)
class ProviderCredential:
    """A retrieved credential: an API key, "not needed", or nothing available.

    The key is excluded from ``repr`` so credentials never reach logs.
    """

    kind: CredentialKind
    api_key: Optional[str] = field(default=None, repr=False)

    @classmethod
    def no_credentials(cls) -> "ProviderCredential":
        return cls("no_credentials")

    @classmethod
    def not_needed(cls) -> "ProviderCredential":
        return cls("not_needed")

    @classmethod
    def from_api_key(cls, api_key: str) -> "ProviderCredential":
        if not api_key:
            raise ValueError("api_key must be non-empty")
        return cls("api_key", api_key)

    @property
    def is_usable(self) -> bool:
        return self.kind != "no_credentials"


__all__ = ["ProviderCredential", "CredentialKind"]
