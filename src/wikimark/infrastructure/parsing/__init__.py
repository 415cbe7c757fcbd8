"""Parsing of the wikimark line dialect."""

from wikimark.infrastructure.parsing.markdown import classify_line, parse_document
from wikimark.infrastructure.parsing.wiki_links import (
    WikiLink,
    extract_wiki_link_targets,
    extract_wiki_links,
)

__all__ = [
    "WikiLink",
    "classify_line",
    "extract_wiki_link_targets",
    "extract_wiki_links",
    "parse_document",
]
