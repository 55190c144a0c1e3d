"""Tests for financial records and double dispatch."""

from dataclasses import FrozenInstanceError

import pytest

from patternctl.domain.records import (
    FinancialRecord,
    FinancialVisitor,
    InvoiceRecord,
    ReceiptRecord,
    RefundRecord,
)


class RecordingVisitor(FinancialVisitor[str]):
    def __init__(self) -> None:
        self.calls: list[str] = []

    def visit_invoice(self, record: InvoiceRecord) -> str:
        self.calls.append("invoice")
        return record.invoice_number

    def visit_receipt(self, record: ReceiptRecord) -> str:
        self.calls.append("receipt")
        return record.receipt_number

    def visit_refund(self, record: RefundRecord) -> str:
        self.calls.append("refund")
        return record.refund_number


@pytest.mark.parametrize(
    "record,expected_call,expected_value",
    [
        (InvoiceRecord(invoice_number="INV9"), "invoice", "INV9"),
        (ReceiptRecord(receipt_number="REC9"), "receipt", "REC9"),
        (RefundRecord(refund_number="REF9"), "refund", "REF9"),
    ],
    ids=["invoice", "receipt", "refund"],
)
def test_accept_routes_to_own_variant_only(
    record: FinancialRecord, expected_call: str, expected_value: str
) -> None:
    visitor = RecordingVisitor()
    assert record.accept(visitor) == expected_value
    assert visitor.calls == [expected_call]


def test_records_are_frozen() -> None:
    record = InvoiceRecord(invoice_number="INV001")
    with pytest.raises(FrozenInstanceError):
        record.invoice_number = "INV002"  # type: ignore[misc]


def test_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        FinancialRecord()  # type: ignore[abstract]
