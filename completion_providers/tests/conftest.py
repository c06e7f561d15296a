"""Pytest configuration for the completion_providers test suite.

Isolates every test from the developer's environment: provider env vars,
config file, and ``.env`` are cleared, and the config cache is reset around
each test. Fixtures provide an offline byte-level tokenizer.
"""

from __future__ import annotations

from typing import Iterator

import pytest
import tiktoken

from completion_providers.base.tokens import BpeTokenizer
from completion_providers.config import reset_config_cache

from .utils import byte_encoding

_ISOLATED_ENV = (
    "COMPLETION_PROVIDER",
    "COMPLETION_CONFIG_FILE",
    "COMPLETION_LOG_LEVEL",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OLLAMA_API_KEY",
    "OLLAMA_MODEL",
    "OLLAMA_BASE_URL",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear provider configuration sources for the duration of a test."""

    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def encoding() -> tiktoken.Encoding:
    return byte_encoding()


@pytest.fixture()
def tokenizer(encoding: tiktoken.Encoding) -> BpeTokenizer:
    return BpeTokenizer(encoding)


@pytest.fixture()
def offline_vocabulary(monkeypatch: pytest.MonkeyPatch, encoding: tiktoken.Encoding) -> list:
    """Route tiktoken lookups to the byte vocabulary; returns the requested model names."""

    requested: list = []

    def _for_model(name: str) -> tiktoken.Encoding:
        requested.append(name)
        return encoding

    monkeypatch.setattr(tiktoken, "encoding_for_model", _for_model)
    monkeypatch.setattr(tiktoken, "get_encoding", lambda name: encoding)
    return requested
