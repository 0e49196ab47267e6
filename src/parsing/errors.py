"""Structured parsing errors for stylesheet color extraction."""

from __future__ import annotations
from typing import Any


class ParsingError(Exception):
    """Base class for parsing related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ColorParseError(ParsingError, ValueError):
    """Raised when a token is not a color the converter understands."""
