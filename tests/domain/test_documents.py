"""Tests for document elements and double dispatch."""

from dataclasses import FrozenInstanceError

import pytest

from patternctl.domain.documents import (
    DocumentElement,
    DocumentVisitor,
    ImageElement,
    TableElement,
    TextElement,
)


class RecordingVisitor(DocumentVisitor[str]):
    """Records which visit method each element reached."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, DocumentElement]] = []

    def visit_text(self, element: TextElement) -> str:
        self.calls.append(("text", element))
        return "text"

    def visit_image(self, element: ImageElement) -> str:
        self.calls.append(("image", element))
        return "image"

    def visit_table(self, element: TableElement) -> str:
        self.calls.append(("table", element))
        return "table"


DISPATCH_CASES = [
    (TextElement(text="hi"), "text"),
    (ImageElement(image_path="a.png"), "image"),
    (TableElement(rows=(("a",),)), "table"),
]


class TestAccept:
    @pytest.mark.parametrize(
        "element,expected",
        DISPATCH_CASES,
        ids=[tag for _, tag in DISPATCH_CASES],
    )
    def test_routes_to_own_variant_only(self, element: DocumentElement, expected: str) -> None:
        visitor = RecordingVisitor()
        assert element.accept(visitor) == expected
        assert visitor.calls == [(expected, element)]

    def test_traversal_keeps_input_order(self) -> None:
        visitor = RecordingVisitor()
        elements = [element for element, _ in reversed(DISPATCH_CASES)]
        for element in elements:
            element.accept(visitor)
        assert [tag for tag, _ in visitor.calls] == ["table", "image", "text"]


class TestElements:
    def test_table_defaults_to_no_rows(self) -> None:
        assert TableElement().rows == ()

    def test_elements_are_frozen(self) -> None:
        element = TextElement(text="hi")
        with pytest.raises(FrozenInstanceError):
            element.text = "bye"  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert ImageElement(image_path="x.png") == ImageElement(image_path="x.png")

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            DocumentElement()  # type: ignore[abstract]

    def test_visitor_must_cover_every_variant(self) -> None:
        class TextOnly(DocumentVisitor[str]):
            def visit_text(self, element: TextElement) -> str:
                return element.text

        with pytest.raises(TypeError):
            TextOnly()  # type: ignore[abstract]
