"""Domain enumerations for wikimark."""

from __future__ import annotations

from enum import Enum


class ElementKind(str, Enum):
    """The structural element kinds a line can be classified as.

    The value doubles as the ``kind`` discriminator in serialised output.
    """

    HEADING = "heading"
    BULLET_LIST = "bullet_list"
    INLINE_TEXT = "inline_text"
