"""Core exceptions for wikimark."""

from wikimark.core.exceptions import ConfigurationError, InputError, WikimarkError

__all__ = [
    "WikimarkError",
    "ConfigurationError",
    "InputError",
]
