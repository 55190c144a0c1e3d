"""Document exporters: HTML and Markdown visitors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patternctl.domain.documents import DocumentVisitor

if TYPE_CHECKING:
    from patternctl.domain.documents import ImageElement, TableElement, TextElement


class HtmlExporterVisitor(DocumentVisitor[str]):
    """Render each element as an HTML fragment.

    Element content is inserted verbatim, without escaping.
    """

    def visit_text(self, element: TextElement) -> str:
        return f"<p>{element.text}</p>"

    def visit_image(self, element: ImageElement) -> str:
        return f'<img src="{element.image_path}" />'

    def visit_table(self, element: TableElement) -> str:
        html = "<table>"
        for row in element.rows:
            html += "<tr>"
            for cell in row:
                html += f"<td>{cell}</td>"
            html += "</tr>"
        html += "</table>"
        return html


class MarkdownExporterVisitor(DocumentVisitor[str]):
    """Render each element as Markdown. The first table row is the header."""

    def visit_text(self, element: TextElement) -> str:
        return element.text

    def visit_image(self, element: ImageElement) -> str:
        return f"![]({element.image_path})"

    def visit_table(self, element: TableElement) -> str:
        if not element.rows:
            return ""
        header, *body = element.rows
        lines = [
            _pipe_row(header),
            _pipe_row(tuple("---" for _ in header)),
        ]
        lines.extend(_pipe_row(row) for row in body)
        return "\n".join(lines)


def _pipe_row(cells: tuple[str, ...]) -> str:
    return "| " + " | ".join(cells) + " |"
