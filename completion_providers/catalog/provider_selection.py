"""
Selected provider, its model variant and its base URL.

The model's provider family must always match the selected provider, so
switching provider resets the model and URL in the same step.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .ai_provider import AiProvider
from .model_variant import AiModelVariant, cycle, provider_of


@dataclass(frozen=True)
class ProviderSelection:
    provider: AiProvider
    model: AiModelVariant
    api_url: str

    def __post_init__(self) -> None:
        if provider_of(self.model) is not self.provider:
            raise ValueError(
                f"model {self.model.value!r} does not belong to provider {self.provider.value!r}"
            )

    @classmethod
    def default_for(cls, provider: AiProvider) -> "ProviderSelection":
        return cls(provider=provider, model=provider.default_model(), api_url=provider.default_api_url())

    def switch_provider(self) -> "ProviderSelection":
        """Move to the next provider with that provider's default model and URL."""
        return ProviderSelection.default_for(self.provider.cycle())

    def cycle_model(self) -> "ProviderSelection":
        return replace(self, model=cycle(self.model))

    def with_api_url(self, api_url: str) -> "ProviderSelection":
        return replace(self, api_url=api_url)


__all__ = ["ProviderSelection"]
