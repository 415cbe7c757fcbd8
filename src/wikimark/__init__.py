"""wikimark: line-oriented markdown with [[wiki-links]] into a document tree."""

from wikimark.domain.entities import (
    BulletList,
    Document,
    Element,
    Heading,
    InlineText,
    TextLine,
)
from wikimark.infrastructure.parsing.markdown import classify_line, parse_document

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BulletList",
    "Document",
    "Element",
    "Heading",
    "InlineText",
    "TextLine",
    "classify_line",
    "parse_document",
]
