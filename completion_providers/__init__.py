"""completion_providers package

Provider-agnostic streaming chat completions with token-aware truncation.

Purpose:
    Request streaming completions from a cloud API or a local model server
    through one capability (``base_model()`` + ``complete()``), and plan
    prompts against each model's context window with BPE token counting and
    truncation.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError` and its typed subclasses, :class:`ErrorCode`
    - Catalog: :class:`AiProvider`, :class:`OpenAiModel`, :class:`OllamaModel`,
      :class:`ProviderSelection`
    - Protocol: :class:`CompletionRequest`, :class:`RequestMessage`, :class:`Role`
    - Factory: :class:`ProviderFactory`, :func:`create_provider`
    - Helpers: :func:`collect_completion`, :class:`TruncationDirection`

Example::

    provider = await create_provider(ProviderSelection.default_for(AiProvider.OLLAMA))
    fragments = await provider.complete(
        CompletionRequest(
            model=provider.base_model().name,
            messages=[RequestMessage(role=Role.USER, content="hi")],
        )
    )
    async for fragment in fragments:
        print(fragment, end="")
"""

from .base.dto import CompletionRequest, RequestMessage, Role
from .base.errors import (
    CapacityError,
    DecodeError,
    ErrorCode,
    ProtocolError,
    ProviderError,
    ServerError,
    TokenizerError,
    TransportError,
)
from .base.language_model import TruncationDirection
from .base.streaming import collect_completion
from .catalog import AiProvider, OllamaModel, OpenAiModel, ProviderSelection
from .factory import ProviderFactory, UnknownProviderError, create_provider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CompletionRequest",
    "RequestMessage",
    "Role",
    "CapacityError",
    "DecodeError",
    "ErrorCode",
    "ProtocolError",
    "ProviderError",
    "ServerError",
    "TokenizerError",
    "TransportError",
    "TruncationDirection",
    "collect_completion",
    "AiProvider",
    "OllamaModel",
    "OpenAiModel",
    "ProviderSelection",
    "ProviderFactory",
    "UnknownProviderError",
    "create_provider",
]
