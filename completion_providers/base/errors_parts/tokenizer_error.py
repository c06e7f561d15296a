"""
Tokenizer failure: no vocabulary could be resolved for a model.

Raised at model-load time or from ``count_tokens``/``truncate`` when the model
was built without a tokenizer. A wrong count is never substituted.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class TokenizerError(ProviderError):
    """No resolvable byte-pair-encoding vocabulary, or a failed decode."""

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        provider: str = "tokenizer",
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.TOKENIZER,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


__all__ = ["TokenizerError"]
