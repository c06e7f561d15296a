"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `completion_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .transport_error import TransportError
from .protocol_error import ProtocolError
from .server_error import ServerError
from .tokenizer_error import TokenizerError
from .decode_error import DecodeError
from .capacity_error import CapacityError
from .classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "TransportError",
    "ProtocolError",
    "ServerError",
    "TokenizerError",
    "DecodeError",
    "CapacityError",
    "classify_exception",
    "code_for_status",
]
