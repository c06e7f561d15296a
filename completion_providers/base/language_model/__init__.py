"""Language model token-accounting surface."""

from .truncation_direction import TruncationDirection
from .language_model import LanguageModel
from .bpe_language_model import BpeLanguageModel
from .model_cache import LanguageModelCache

__all__ = [
    "TruncationDirection",
    "LanguageModel",
    "BpeLanguageModel",
    "LanguageModelCache",
]
