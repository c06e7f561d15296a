"""Credential repositories."""

from .keys import KeysRepository, KeyResolution

__all__ = ["KeysRepository", "KeyResolution"]
