"""Exception hierarchy for keymapdoc.

The parsing core never raises for content problems; these exceptions belong
to the boundaries that read files and configuration.
"""

from typing import Any


class KeymapDocError(Exception):
    """Base exception for all keymapdoc errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class KeymapError(KeymapDocError):
    """Raised when a keymap source cannot be read."""


class ConfigError(KeymapDocError):
    """Raised when a configuration file or value is invalid."""


__all__ = ["KeymapDocError", "KeymapError", "ConfigError"]
