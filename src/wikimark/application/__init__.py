"""Application-level passes over parsed documents."""

from wikimark.application.outline import nest_document

__all__ = ["nest_document"]
