"""Interface parts package (one protocol per module)."""

from .spawner import Spawner
from .credential_provider import CredentialProvider
from .completion_provider import CompletionProvider

__all__ = ["Spawner", "CredentialProvider", "CompletionProvider"]
