"""Unified configuration layer for completion providers.

Goals
-----
* Centralize defaults (model names, base URLs, default provider).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by COMPLETION_CONFIG_FILE
    3. Environment variables (e.g. OLLAMA_MODEL, OPENAI_BASE_URL)
    4. In-code overrides passed to helper
* Produce the validated {provider, model, base URL} triple consumed by the
  provider factory.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_BASE_URL, plus COMPLETION_PROVIDER for the
selected provider. API keys are not part of this config; they resolve through
``KeysRepository``.

External Config File
--------------------
JSON is tried first, then YAML. Structure example:

```
default_provider: ollama
openai:
  model: gpt-4-0613
ollama:
  model: codellama:13b
  base_url: http://gpu-box:11434/v1
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
* get_default_provider() -> str
* get_provider_selection(provider=None, overrides=None) -> ProviderSelection
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml

from .defaults import (
    CONFIG_FILE_ENV,
    DEFAULT_PROVIDER,
    OLLAMA_API_URL,
    OLLAMA_DEFAULT_MODEL,
    OPEN_AI_API_URL,
    OPENAI_DEFAULT_MODEL,
    PROVIDER_ENV,
)
from .env import is_placeholder

if TYPE_CHECKING:
    from ..catalog import ProviderSelection


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPEN_AI_API_URL},
    "ollama": {"model": OLLAMA_DEFAULT_MODEL, "base_url": OLLAMA_API_URL},
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _parse_config_text(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    data: Any = {}
    path = os.getenv(CONFIG_FILE_ENV)
    if path and Path(path).is_file():
        data = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the parsed config file and .env state so they are re-read on next use."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


def get_default_provider() -> str:
    """Return the selected provider key: env, then config file, then the built-in default."""
    _load_dotenv_once()
    selected = os.getenv(PROVIDER_ENV) or _load_external_config().get("default_provider")
    if isinstance(selected, str) and selected.strip():
        return selected.strip().lower()
    return DEFAULT_PROVIDER


def get_provider_selection(
    provider: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> "ProviderSelection":
    """Resolve the validated {provider, model variant, base URL} triple.

    A configured model that is not a variant of the selected provider is
    replaced by that provider's default model (with a warning) so the
    provider/model coupling always holds.

    Raises
    ------
    ValueError
        When the provider name is not one of the supported providers.
    """
    from ..base.logging import get_logger, log_event
    from ..catalog import AiProvider, ProviderSelection, parse_variant, provider_of

    kind = AiProvider(provider.lower().strip() if provider else get_default_provider())
    cfg = get_provider_config(kind.value, overrides)

    model = kind.default_model()
    configured = cfg.get("model")
    if configured:
        variant = parse_variant(str(configured))
        if variant is not None and provider_of(variant) is kind:
            model = variant
        else:
            log_event(
                get_logger("completion.config"),
                "config.model_mismatch",
                level=logging.WARNING,
                provider=kind.value,
                configured=str(configured),
                using=model.value,
            )
    base_url = cfg.get("base_url") or kind.default_api_url()
    return ProviderSelection(provider=kind, model=model, api_url=str(base_url))


__all__ = [
    "get_provider_config",
    "get_model",
    "get_default_provider",
    "get_provider_selection",
    "reset_config_cache",
    "DEFAULTS",
]
