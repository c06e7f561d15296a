"""
Completion Base Package

Provider-agnostic contracts and machinery for the completion layer:
- Interfaces: completion, credential and spawner protocols
- DTOs: wire schema for requests and streamed events
- Tokens / language models: BPE token accounting and truncation
- Streaming: the chat completions SSE client and its channel
- Repositories: API key resolution
"""

from .credentials import ProviderCredential
from .dto import CompletionRequest, RequestMessage, Role, StreamEvent
from .errors import (
    CapacityError,
    DecodeError,
    ErrorCode,
    ProtocolError,
    ProviderError,
    ServerError,
    TokenizerError,
    TransportError,
)
from .execution import BackgroundExecutor
from .interfaces import CompletionProvider, CredentialProvider, LanguageModel, Spawner
from .language_model import BpeLanguageModel, LanguageModelCache, TruncationDirection
from .repositories.keys import KeyResolution, KeysRepository
from .streaming import EventChannel, collect_completion, stream_completion
from .tokens import BpeTokenizer, load_tokenizer

__all__ = [
    "ProviderCredential",
    "CompletionRequest",
    "RequestMessage",
    "Role",
    "StreamEvent",
    "CapacityError",
    "DecodeError",
    "ErrorCode",
    "ProtocolError",
    "ProviderError",
    "ServerError",
    "TokenizerError",
    "TransportError",
    "BackgroundExecutor",
    "CompletionProvider",
    "CredentialProvider",
    "LanguageModel",
    "Spawner",
    "BpeLanguageModel",
    "LanguageModelCache",
    "TruncationDirection",
    "KeyResolution",
    "KeysRepository",
    "EventChannel",
    "collect_completion",
    "stream_completion",
    "BpeTokenizer",
    "load_tokenizer",
]
