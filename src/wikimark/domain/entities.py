"""Domain entities for wikimark.

All entities are frozen Pydantic BaseModels. A :class:`Document` is built once
by a single parse call and never mutated afterwards. Sequence fields are
tuples, so nothing can be changed in place either; passes that reshape a
document (see ``wikimark.application.outline``) return new instances.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from wikimark.domain.enums import ElementKind


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


class InlineText(BaseModel):
    """A text payload paired with the wiki-link targets found in its line."""

    model_config = ConfigDict(frozen=True)

    content: str
    links: tuple[str, ...] = ()  # source order, duplicates kept


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------


class Heading(BaseModel):
    """A ``#``-prefixed line. ``level`` is the count of leading ``#``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ElementKind.HEADING] = ElementKind.HEADING
    level: int = Field(ge=1)
    title: InlineText
    # Empty after parsing; only populated by the outline pass.
    children: tuple[Element, ...] = ()

    @property
    def links(self) -> tuple[str, ...]:
        return self.title.links


class BulletList(BaseModel):
    """A ``-``-prefixed line. Parsing yields exactly one item per line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ElementKind.BULLET_LIST] = ElementKind.BULLET_LIST
    items: tuple[InlineText, ...] = ()

    @property
    def links(self) -> tuple[str, ...]:
        return tuple(link for item in self.items for link in item.links)


class TextLine(BaseModel):
    """Any non-blank line that is neither a heading nor a bullet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[ElementKind.INLINE_TEXT] = ElementKind.INLINE_TEXT
    text: InlineText

    @property
    def links(self) -> tuple[str, ...]:
        return self.text.links


Element = Annotated[
    Union[Heading, BulletList, TextLine],
    Field(discriminator="kind"),
]

Heading.model_rebuild()


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class Document(BaseModel):
    """An ordered sequence of elements, one per non-blank input line."""

    model_config = ConfigDict(frozen=True)

    elements: tuple[Element, ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def walk(self) -> Iterator[Element]:
        """Yield every element depth-first, headings before their children."""
        stack: list[Element] = list(reversed(self.elements))
        while stack:
            element = stack.pop()
            yield element
            if isinstance(element, Heading):
                stack.extend(reversed(element.children))

    def link_targets(self) -> list[str]:
        """Return all link targets in document order."""
        return [link for element in self.walk() for link in element.links]
