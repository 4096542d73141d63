"""Error types raised by uitree."""

from __future__ import annotations


class UITreeError(Exception):
    """Base error carrying a message and an optional underlying cause."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return f"uitree: {self.message}"
        return f"uitree: {self.message}. {self.cause}"


class DeserializationError(UITreeError):
    """An element document could not be parsed into an element tree."""


class TemplateError(UITreeError):
    """A page template failed to load or render."""


class ConfigError(UITreeError):
    """A configuration file exists but does not hold valid settings."""


__all__ = ["ConfigError", "DeserializationError", "TemplateError", "UITreeError"]
