"""Structured error body returned with non-success statuses: ``{"error": {"message": ...}}``."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ValidationError


class ErrorDetail(BaseModel):
    message: str = ""


class ErrorBody(BaseModel):
    error: ErrorDetail

    @classmethod
    def extract_message(cls, text: str) -> Optional[str]:
        """Return the non-empty ``error.message`` in ``text``, else ``None``."""
        try:
            parsed = cls.model_validate_json(text)
        except ValidationError:
            return None
        return parsed.error.message or None


__all__ = ["ErrorDetail", "ErrorBody"]
