"""completion_providers.config.defaults
=====================================

Central place for small, stable default values: provider base URLs, default
model names and the default provider. These can be overridden via environment
variables or an external configuration file.

This module intentionally imports nothing from the rest of the package so it
can be used from any layer without circular imports.
"""

from __future__ import annotations

# Cloud API (OpenAI) defaults
OPEN_AI_API_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo-0613"

# Local model server (Ollama, OpenAI-compatible endpoint) defaults
OLLAMA_API_URL = "http://localhost:11434/v1"
OLLAMA_DEFAULT_MODEL = "codellama:7b"

# Provider selected when neither env nor config file names one
DEFAULT_PROVIDER = "openai"

# Environment variables for the settings layer
CONFIG_FILE_ENV = "COMPLETION_CONFIG_FILE"
PROVIDER_ENV = "COMPLETION_PROVIDER"


__all__ = [
    "OPEN_AI_API_URL",
    "OPENAI_DEFAULT_MODEL",
    "OLLAMA_API_URL",
    "OLLAMA_DEFAULT_MODEL",
    "DEFAULT_PROVIDER",
    "CONFIG_FILE_ENV",
    "PROVIDER_ENV",
]
