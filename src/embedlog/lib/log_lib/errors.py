"""Exceptions raised by log_lib."""

from typing import Optional


class EmbedLogError(Exception):
    """Base class for every error raised by the logging engine."""


class LevelError(EmbedLogError, ValueError):
    """A severity level name or number could not be resolved."""


class SinkNotConfiguredError(EmbedLogError, RuntimeError):
    """An emit call reached a logger that has no sink.

    Only raised when the logger runs with checks enabled. With checks
    off the emit is dropped silently.
    """


class FormatArgumentError(EmbedLogError, TypeError):
    """Strict-mode mismatch between format specifiers and arguments.

    Attributes:
        specifier: The specifier character involved, if any.
        index: Zero-based argument position, if any.
    """

    def __init__(self, message: str, specifier: Optional[str] = None,
                 index: Optional[int] = None):
        super().__init__(message)
        self.specifier = specifier
        self.index = index
