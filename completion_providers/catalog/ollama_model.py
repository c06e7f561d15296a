"""Local model-server variants. Values are the literal on-wire model names."""

from __future__ import annotations

from enum import Enum


class OllamaModel(str, Enum):
    """Selectable local models, in cycle order."""

    CODE_LLAMA_7B = "codellama:7b"
    CODE_LLAMA_13B = "codellama:13b"

    @property
    def full_name(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    def cycle(self) -> "OllamaModel":
        members = list(OllamaModel)
        return members[(members.index(self) + 1) % len(members)]


_SHORT_NAMES = {
    OllamaModel.CODE_LLAMA_7B: "codellama-7",
    OllamaModel.CODE_LLAMA_13B: "codellama-13",
}


__all__ = ["OllamaModel"]
