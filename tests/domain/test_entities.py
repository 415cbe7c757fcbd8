"""Tests for wikimark.domain.entities."""

import pytest
from pydantic import ValidationError

from wikimark.domain.entities import BulletList, Document, Heading, InlineText, TextLine
from wikimark.domain.enums import ElementKind
from wikimark.infrastructure.parsing.markdown import parse_document


class TestInlineText:
    def test_defaults(self):
        text = InlineText(content="hello")
        assert text.links == ()

    def test_frozen(self):
        text = InlineText(content="hello")
        with pytest.raises(ValidationError):
            text.content = "changed"


class TestHeading:
    def test_kind(self):
        h = Heading(level=2, title=InlineText(content="T"))
        assert h.kind == ElementKind.HEADING
        assert h.children == ()

    def test_level_must_be_positive(self):
        with pytest.raises(ValidationError):
            Heading(level=0, title=InlineText(content="T"))

    def test_links_come_from_title(self):
        h = Heading(level=1, title=InlineText(content="T", links=["A"]))
        assert h.links == ("A",)


class TestBulletList:
    def test_links_flatten_items(self):
        bl = BulletList(items=[
            InlineText(content="a", links=["A"]),
            InlineText(content="b", links=["B", "A"]),
        ])
        assert bl.kind == ElementKind.BULLET_LIST
        assert bl.links == ("A", "B", "A")


class TestDocument:
    def _nested(self) -> Document:
        return Document(elements=[
            TextLine(text=InlineText(content="intro [[Z]]", links=["Z"])),
            Heading(
                level=1,
                title=InlineText(content="A [[A]]", links=["A"]),
                children=[
                    BulletList(items=[InlineText(content="b", links=["B"])]),
                    Heading(
                        level=2,
                        title=InlineText(content="C"),
                        children=[TextLine(text=InlineText(content="d [[D]]", links=["D"]))],
                    ),
                ],
            ),
        ])

    def test_len_counts_top_level(self):
        assert len(self._nested()) == 2

    def test_walk_is_preorder(self):
        kinds = [e.kind for e in self._nested().walk()]
        assert kinds == [
            ElementKind.INLINE_TEXT,
            ElementKind.HEADING,
            ElementKind.BULLET_LIST,
            ElementKind.HEADING,
            ElementKind.INLINE_TEXT,
        ]

    def test_link_targets_in_document_order(self):
        assert self._nested().link_targets() == ["Z", "A", "B", "D"]

    def test_json_round_trip(self):
        doc = self._nested()
        data = doc.model_dump(mode="json")
        assert data["elements"][0]["kind"] == "inline_text"
        assert data["elements"][1]["children"][0]["kind"] == "bullet_list"
        assert Document.model_validate(data) == doc

    def test_validate_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            Document.model_validate({"elements": [{"kind": "table"}]})


class TestImmutability:
    def test_links_cannot_be_changed_in_place(self):
        doc = parse_document("# T [[A]]\n- [[B]]\n[[C]]")
        for element in doc.elements:
            with pytest.raises(AttributeError):
                element.links.append("Injected")
        assert doc.link_targets() == ["A", "B", "C"]

    def test_sequences_are_tuples(self):
        doc = parse_document("# T [[A]]\n- item")
        assert isinstance(doc.elements, tuple)
        assert isinstance(doc.elements[0].children, tuple)
        assert isinstance(doc.elements[0].title.links, tuple)
        assert isinstance(doc.elements[1].items, tuple)

    def test_lists_are_converted_on_construction(self):
        links = ["A"]
        text = InlineText(content="x", links=links)
        links.append("B")
        assert text.links == ("A",)
