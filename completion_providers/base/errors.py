"""Unified completion error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``completion_providers.base.errors_parts`` to maintain a stable import path
while enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.transport_error import TransportError
from .errors_parts.protocol_error import ProtocolError
from .errors_parts.server_error import ServerError
from .errors_parts.tokenizer_error import TokenizerError
from .errors_parts.decode_error import DecodeError
from .errors_parts.capacity_error import CapacityError
from .errors_parts.classification import classify_exception, code_for_status

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
