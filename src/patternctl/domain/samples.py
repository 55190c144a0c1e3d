"""Fixed sample inputs rendered by the export commands."""

from __future__ import annotations

from patternctl.domain.documents import DocumentElement, ImageElement, TableElement, TextElement
from patternctl.domain.records import FinancialRecord, InvoiceRecord, ReceiptRecord, RefundRecord


def sample_documents() -> list[DocumentElement]:
    return [
        TextElement(text="Hello, World!"),
        ImageElement(image_path="image.png"),
        TableElement(rows=(("Header1", "Header2"), ("Row1Col1", "Row1Col2"))),
    ]


def sample_records() -> list[FinancialRecord]:
    return [
        InvoiceRecord(invoice_number="INV001"),
        ReceiptRecord(receipt_number="REC001"),
        RefundRecord(refund_number="REF001"),
    ]
