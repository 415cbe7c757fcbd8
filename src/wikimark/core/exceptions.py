"""Custom exceptions for wikimark.

The parser itself never raises: malformed markup falls through to a
lower-priority element kind. These errors belong to the edges around it
(configuration and reading input).
"""


class WikimarkError(Exception):
    """Base exception for all wikimark errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(WikimarkError):
    """Raised when there's a configuration problem."""

    pass


class InputError(WikimarkError):
    """Raised when an input source cannot be read or decoded."""

    pass
