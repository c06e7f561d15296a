"""Provider interfaces public surface.

Re-exports the one-protocol-per-file modules under
``completion_providers.base.interfaces_parts``.
"""

from .interfaces_parts.spawner import Spawner
from .interfaces_parts.credential_provider import CredentialProvider
from .interfaces_parts.completion_provider import CompletionProvider
from .language_model import LanguageModel

__all__ = ["Spawner", "CredentialProvider", "CompletionProvider", "LanguageModel"]
