"""Document elements and the abstract document visitor.

The element hierarchy is closed (text, image, table). Each element
routes ``accept(visitor)`` to the one visitor method named after its own
variant (double dispatch), so new operations are added as visitors
without touching the elements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class DocumentVisitor[T](ABC):
    """Operation over every document element variant."""

    @abstractmethod
    def visit_text(self, element: TextElement) -> T: ...

    @abstractmethod
    def visit_image(self, element: ImageElement) -> T: ...

    @abstractmethod
    def visit_table(self, element: TableElement) -> T: ...


class DocumentElement(ABC):
    """Base for the closed set of document element variants."""

    @abstractmethod
    def accept[T](self, visitor: DocumentVisitor[T]) -> T:
        """Dispatch to the visitor method for this element's variant."""


@dataclass(frozen=True)
class TextElement(DocumentElement):
    text: str

    def accept[T](self, visitor: DocumentVisitor[T]) -> T:
        return visitor.visit_text(self)


@dataclass(frozen=True)
class ImageElement(DocumentElement):
    image_path: str

    def accept[T](self, visitor: DocumentVisitor[T]) -> T:
        return visitor.visit_image(self)


@dataclass(frozen=True)
class TableElement(DocumentElement):
    """Table of string cells; rows and cells keep their given order."""

    rows: tuple[tuple[str, ...], ...] = ()

    def accept[T](self, visitor: DocumentVisitor[T]) -> T:
        return visitor.visit_table(self)
