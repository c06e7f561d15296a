"""Cloud model variants. Values are the literal on-wire model names."""

from __future__ import annotations

from enum import Enum


class OpenAiModel(str, Enum):
    """Selectable cloud models, in cycle order."""

    THREE_POINT_FIVE_TURBO = "gpt-3.5-turbo-0613"
    FOUR = "gpt-4-0613"
    FOUR_TURBO = "gpt-4-1106-preview"

    @property
    def full_name(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    def cycle(self) -> "OpenAiModel":
        members = list(OpenAiModel)
        return members[(members.index(self) + 1) % len(members)]


_SHORT_NAMES = {
    OpenAiModel.THREE_POINT_FIVE_TURBO: "gpt-3.5-turbo",
    OpenAiModel.FOUR: "gpt-4",
    OpenAiModel.FOUR_TURBO: "gpt-4-turbo",
}


__all__ = ["OpenAiModel"]
