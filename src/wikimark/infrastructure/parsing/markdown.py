"""Line-oriented markdown parsing.

Each line is classified on its own, with no state carried between lines.
The first matching rule wins:

1. Heading   -- one or more leading ``#``
2. Bullet    -- a leading ``-``
3. Link text -- any line containing at least one ``[[...]]``
4. Plain     -- anything else that is not blank

Classification is total: malformed markup such as an unterminated ``[[``
falls through to a lower rule instead of raising.
"""

from __future__ import annotations

from wikimark.domain.entities import (
    BulletList,
    Document,
    Element,
    Heading,
    InlineText,
    TextLine,
)
from wikimark.infrastructure.parsing.text import split_lines, trim
from wikimark.infrastructure.parsing.wiki_links import extract_wiki_link_targets


def parse_document(text: str) -> Document:
    """Parse *text* into a flat :class:`Document`.

    Blank lines produce no element; every other line produces exactly one,
    in input order. Heading ``children`` are left empty.
    """
    elements: list[Element] = []
    for line in split_lines(text):
        element = classify_line(line)
        if element is not None:
            elements.append(element)
    return Document(elements=elements)


def classify_line(line: str) -> Element | None:
    """Map a single line to an element, or ``None`` if it is blank.

    Surrounding whitespace is stripped first and never affects the outcome.
    """
    line = trim(line)
    if not line:
        return None

    return _parse_heading(line) or _parse_bullet(line) or _parse_text(line)


def _parse_heading(line: str) -> Heading | None:
    level = len(line) - len(line.lstrip("#"))
    if level == 0:
        return None

    return Heading(
        level=level,
        # Links come from the full line, markers included.
        title=InlineText(
            content=trim(line[level:]),
            links=extract_wiki_link_targets(line),
        ),
    )


def _parse_bullet(line: str) -> BulletList | None:
    if not line.startswith("-"):
        return None

    return BulletList(items=[
        InlineText(
            content=trim(line[1:]),
            links=extract_wiki_link_targets(line),
        ),
    ])


def _parse_text(line: str) -> TextLine:
    # Link-bearing and plain lines share a shape: the full line is kept as
    # content, and the link list is simply empty for plain text.
    return TextLine(text=InlineText(
        content=line,
        links=extract_wiki_link_targets(line),
    ))
