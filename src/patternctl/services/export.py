"""ExportService: run an exporter visitor over a sequence of elements."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import structlog

from patternctl.domain.types import DocumentFormat, RecordFormat
from patternctl.exporters.documents import HtmlExporterVisitor, MarkdownExporterVisitor
from patternctl.exporters.records import CsvExporterVisitor, JsonExporterVisitor
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult
from patternctl.services.telemetry import stage, traced

if TYPE_CHECKING:
    from patternctl.domain.documents import DocumentElement, DocumentVisitor
    from patternctl.domain.records import FinancialRecord, FinancialVisitor

log = structlog.get_logger(__name__)

DOCUMENT_EXPORTERS: dict[DocumentFormat, Callable[[], DocumentVisitor[str]]] = {
    DocumentFormat.HTML: HtmlExporterVisitor,
    DocumentFormat.MARKDOWN: MarkdownExporterVisitor,
}

RECORD_EXPORTERS: dict[RecordFormat, Callable[[], FinancialVisitor[str]]] = {
    RecordFormat.CSV: CsvExporterVisitor,
    RecordFormat.JSON: JsonExporterVisitor,
}


class ExportService(BaseService):
    """Visitor-pattern operations over documents and financial records."""

    @traced
    def export_documents(
        self,
        elements: Sequence[DocumentElement],
        *,
        fmt: str | None = None,
    ) -> ServiceResult:
        """Render *elements* in input order, one output per element.

        *fmt* defaults to ``[export] document_format``.
        """
        fmt = (fmt or self._settings.export.document_format).lower()
        try:
            visitor = DOCUMENT_EXPORTERS[DocumentFormat(fmt)]()
        except ValueError:
            return self._invalid_format("export_documents", fmt, list(DocumentFormat))

        with stage("export.dispatch") as step:
            lines = [element.accept(visitor) for element in elements]
            if step:
                step.annotate("elements", len(lines))

        log.debug("export.documents", format=fmt, element_count=len(lines))
        return ServiceResult(
            ok=True,
            op="export_documents",
            data={"format": fmt, "element_count": len(lines), "lines": lines},
        )

    @traced
    def export_records(
        self,
        records: Sequence[FinancialRecord],
        *,
        fmt: str | None = None,
    ) -> ServiceResult:
        """Render *records* in input order, one line per record.

        *fmt* defaults to ``[export] record_format``.
        """
        fmt = (fmt or self._settings.export.record_format).lower()
        try:
            visitor = RECORD_EXPORTERS[RecordFormat(fmt)]()
        except ValueError:
            return self._invalid_format("export_records", fmt, list(RecordFormat))

        with stage("export.dispatch") as step:
            lines = [record.accept(visitor) for record in records]
            if step:
                step.annotate("elements", len(lines))

        log.debug("export.records", format=fmt, element_count=len(lines))
        return ServiceResult(
            ok=True,
            op="export_records",
            data={"format": fmt, "element_count": len(lines), "lines": lines},
        )

    def _invalid_format(self, op: str, fmt: str, valid: list[str]) -> ServiceResult:
        return ServiceResult.failure(
            op,
            "INVALID_FORMAT",
            f"Unknown export format: {fmt}",
            format=fmt,
            valid=[str(v) for v in valid],
        )
