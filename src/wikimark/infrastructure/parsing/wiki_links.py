"""Wiki-link extraction from a line of text.

A link is ``[[Target]]``: the payload is one or more characters other than
``]`` and ends at the first ``]]``. Payloads are trimmed but never dropped,
so ``[[ ]]`` yields an empty target.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from wikimark.infrastructure.parsing.text import trim

_WIKI_LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")


@dataclass(frozen=True)
class WikiLink:
    """A matched wiki-link."""

    raw: str     # untrimmed text inside [[ ]]
    target: str  # trimmed payload
    start: int   # offset of the opening [[
    end: int     # offset just past the closing ]]


def extract_wiki_links(content: str) -> list[WikiLink]:
    """Extract all ``[[...]]`` wiki-links from *content*, left to right.

    Matches never overlap; an unterminated ``[[`` is skipped and scanning
    continues after it.
    """
    return [
        WikiLink(
            raw=match.group(1),
            target=trim(match.group(1)),
            start=match.start(),
            end=match.end(),
        )
        for match in _WIKI_LINK_RE.finditer(content)
    ]


def extract_wiki_link_targets(content: str) -> list[str]:
    """Return just the target names from all wiki-links in *content*.

    Order and duplicates are preserved.
    """
    return [link.target for link in extract_wiki_links(content)]
