"""Which end of a prompt loses tokens when it is truncated."""

from __future__ import annotations

from enum import Enum


class TruncationDirection(str, Enum):
    """``END`` keeps the first tokens; ``START`` keeps the last tokens."""

    START = "start"
    END = "end"


__all__ = ["TruncationDirection"]
