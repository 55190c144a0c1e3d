"""Financial record exporters: CSV and JSON-lines visitors."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from patternctl.domain.records import FinancialVisitor

if TYPE_CHECKING:
    from patternctl.domain.records import InvoiceRecord, ReceiptRecord, RefundRecord


class CsvExporterVisitor(FinancialVisitor[str]):
    """Render each record as a ``Kind, number`` CSV line."""

    def visit_invoice(self, record: InvoiceRecord) -> str:
        return f"Invoice, {record.invoice_number}"

    def visit_receipt(self, record: ReceiptRecord) -> str:
        return f"Receipt, {record.receipt_number}"

    def visit_refund(self, record: RefundRecord) -> str:
        return f"Refund, {record.refund_number}"


class JsonExporterVisitor(FinancialVisitor[str]):
    """Render each record as one compact JSON object."""

    def visit_invoice(self, record: InvoiceRecord) -> str:
        return _dump("invoice", record.invoice_number)

    def visit_receipt(self, record: ReceiptRecord) -> str:
        return _dump("receipt", record.receipt_number)

    def visit_refund(self, record: RefundRecord) -> str:
        return _dump("refund", record.refund_number)


def _dump(kind: str, number: str) -> str:
    return json.dumps({"type": kind, "number": number})
