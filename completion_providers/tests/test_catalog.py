"""Model catalog, provider tags and the provider/model coupling."""

from __future__ import annotations

import pytest

from completion_providers.catalog import (
    AiProvider,
    OllamaModel,
    OpenAiModel,
    ProviderSelection,
    cycle,
    full_name,
    parse_variant,
    provider_of,
    short_name,
)
from completion_providers.config.defaults import OLLAMA_API_URL, OPEN_AI_API_URL


def test_cloud_names() -> None:
    assert [full_name(m) for m in OpenAiModel] == [  # nosec B101
        "gpt-3.5-turbo-0613",
        "gpt-4-0613",
        "gpt-4-1106-preview",
    ]
    assert [short_name(m) for m in OpenAiModel] == ["gpt-3.5-turbo", "gpt-4", "gpt-4-turbo"]  # nosec B101


def test_local_names() -> None:
    assert [full_name(m) for m in OllamaModel] == ["codellama:7b", "codellama:13b"]  # nosec B101
    assert [short_name(m) for m in OllamaModel] == ["codellama-7", "codellama-13"]  # nosec B101


@pytest.mark.parametrize("family", [OpenAiModel, OllamaModel])
def test_cycle_is_a_full_permutation_within_family(family) -> None:
    members = list(family)
    for start in members:
        seen = [start]
        current = cycle(start)
        while current != start:
            assert current not in seen  # nosec B101
            assert type(current) is family  # nosec B101
            seen.append(current)
            current = cycle(current)
        assert len(seen) == len(members)  # nosec B101
        assert cycle(start) != start  # nosec B101


def test_cloud_cycle_order() -> None:
    m = OpenAiModel.THREE_POINT_FIVE_TURBO
    assert cycle(m) is OpenAiModel.FOUR  # nosec B101
    assert cycle(cycle(m)) is OpenAiModel.FOUR_TURBO  # nosec B101
    assert cycle(cycle(cycle(m))) is m  # nosec B101


def test_parse_variant_and_provider_of() -> None:
    assert parse_variant("gpt-4-0613") is OpenAiModel.FOUR  # nosec B101
    assert parse_variant("codellama:13b") is OllamaModel.CODE_LLAMA_13B  # nosec B101
    assert parse_variant("gpt-4") is None  # nosec B101
    assert provider_of(OllamaModel.CODE_LLAMA_7B) is AiProvider.OLLAMA  # nosec B101
    assert provider_of(OpenAiModel.FOUR) is AiProvider.OPENAI  # nosec B101


def test_dispatch_rejects_foreign_values() -> None:
    with pytest.raises(TypeError):
        full_name("gpt-4-0613")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        cycle(3)  # type: ignore[arg-type]


def test_ai_provider_metadata() -> None:
    assert AiProvider.OPENAI.display_name == "Open AI"  # nosec B101
    assert AiProvider.OLLAMA.display_name == "Ollama"  # nosec B101
    assert AiProvider.OPENAI.cycle() is AiProvider.OLLAMA  # nosec B101
    assert AiProvider.OLLAMA.cycle() is AiProvider.OPENAI  # nosec B101
    assert AiProvider.OPENAI.default_model() is OpenAiModel.THREE_POINT_FIVE_TURBO  # nosec B101
    assert AiProvider.OLLAMA.default_model() is OllamaModel.CODE_LLAMA_7B  # nosec B101
    assert AiProvider.OPENAI.default_api_url() == OPEN_AI_API_URL  # nosec B101
    assert AiProvider.OLLAMA.default_api_url() == "http://localhost:11434/v1" == OLLAMA_API_URL  # nosec B101


def test_selection_rejects_mismatched_model() -> None:
    with pytest.raises(ValueError):
        ProviderSelection(AiProvider.OLLAMA, OpenAiModel.FOUR, OLLAMA_API_URL)


def test_switch_provider_moves_model_and_url_together() -> None:
    selection = ProviderSelection(AiProvider.OPENAI, OpenAiModel.FOUR_TURBO, "https://proxy.internal/v1")
    switched = selection.switch_provider()
    assert switched == ProviderSelection(AiProvider.OLLAMA, OllamaModel.CODE_LLAMA_7B, OLLAMA_API_URL)  # nosec B101
    assert switched.switch_provider().model is OpenAiModel.THREE_POINT_FIVE_TURBO  # nosec B101


def test_cycle_model_stays_within_provider() -> None:
    selection = ProviderSelection.default_for(AiProvider.OLLAMA).with_api_url("http://gpu:11434/v1")
    cycled = selection.cycle_model()
    assert cycled.model is OllamaModel.CODE_LLAMA_13B  # nosec B101
    assert cycled.api_url == "http://gpu:11434/v1"  # nosec B101
    assert cycled.cycle_model().model is OllamaModel.CODE_LLAMA_7B  # nosec B101
