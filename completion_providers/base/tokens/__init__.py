"""Tokenizer adapter public surface."""

from .tokenizer import BpeTokenizer, load_tokenizer, DEFAULT_ENCODING

__all__ = ["BpeTokenizer", "load_tokenizer", "DEFAULT_ENCODING"]
