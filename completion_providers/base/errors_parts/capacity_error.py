"""Capacity lookup failure for a model without a usable name."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class CapacityError(ProviderError):
    """Context window size cannot be determined."""

    def __init__(self, message: str, model: Optional[str] = None, provider: str = "model") -> None:
        super().__init__(code=ErrorCode.CAPACITY, message=message, provider=provider, model=model)


__all__ = ["CapacityError"]
