"""Configuration module for wikimark."""

from wikimark.config.logging import configure_logging, get_logger
from wikimark.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging", "get_logger"]
