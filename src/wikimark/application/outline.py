"""Heading outline: nest a flat document under its headings.

``parse_document`` always returns a flat document whose headings have no
children. :func:`nest_document` is the explicit second pass that groups each
run of elements under the nearest preceding heading of a lower level. A
heading closes every open heading of the same or deeper level, as in::

    # A          A
    text    ->   ├── text
    ## B         └── B
    - item           └── item
    # C          C
"""

from __future__ import annotations

from wikimark.domain.entities import Document, Element, Heading


def nest_document(document: Document) -> Document:
    """Return a new document with elements nested under their headings.

    Elements before the first heading stay at the top level. The input
    document is not modified. Nesting uses an explicit stack of open
    headings, so depth is bounded only by the number of distinct levels.
    """
    roots: list[Element] = []
    # (heading, children collected so far) for each open heading, outermost first
    open_headings: list[tuple[Heading, list[Element]]] = []

    def _close() -> None:
        heading, children = open_headings.pop()
        closed = heading.model_copy(update={"children": tuple(children)})
        parent = open_headings[-1][1] if open_headings else roots
        parent.append(closed)

    for element in document.elements:
        if isinstance(element, Heading):
            while open_headings and open_headings[-1][0].level >= element.level:
                _close()
            open_headings.append((element, list(element.children)))
        elif open_headings:
            open_headings[-1][1].append(element)
        else:
            roots.append(element)

    while open_headings:
        _close()

    return Document(elements=roots)
