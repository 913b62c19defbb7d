"""Exception types raised by the translation layer.

Validation failures raise; soft fallbacks (a missing translation, an unknown
catalog entry) never do and simply return a usable string instead.
"""

from typing import Any


def describe_type(value: Any) -> str:
    """Return a short type name for error messages."""
    return type(value).__name__


class TranslationError(Exception):
    """Base class for all translation layer errors."""


class InvalidArgumentError(TranslationError, ValueError):
    """A parameter has the wrong type or an unacceptable value."""


class InvalidLanguageError(InvalidArgumentError):
    """A language was referenced that is not in the configured language set.

    Attributes:
        language: The offending language ident (or value).
    """

    def __init__(self, language: Any, message: str = ""):
        self.language = language
        super().__init__(message or f'Invalid language: "{language}"')


class ResourceParseError(TranslationError, ValueError):
    """A metadata or resource file could not be parsed.

    Attributes:
        path: File that failed to parse.
        reason: Human-readable reason reported by the parser.
    """

    def __init__(self, path: Any, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")


class NotConfiguredError(TranslationError, RuntimeError):
    """A component was used before it was set up."""
