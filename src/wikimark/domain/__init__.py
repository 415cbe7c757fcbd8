"""Domain model for wikimark documents."""

from wikimark.domain.entities import (
    BulletList,
    Document,
    Element,
    Heading,
    InlineText,
    TextLine,
)
from wikimark.domain.enums import ElementKind

__all__ = [
    "BulletList",
    "Document",
    "Element",
    "ElementKind",
    "Heading",
    "InlineText",
    "TextLine",
]
