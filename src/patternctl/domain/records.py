"""Financial records and the abstract financial visitor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class FinancialVisitor[T](ABC):
    """Operation over every financial record variant."""

    @abstractmethod
    def visit_invoice(self, record: InvoiceRecord) -> T: ...

    @abstractmethod
    def visit_receipt(self, record: ReceiptRecord) -> T: ...

    @abstractmethod
    def visit_refund(self, record: RefundRecord) -> T: ...


class FinancialRecord(ABC):
    """Base for the closed set of financial record variants."""

    @abstractmethod
    def accept[T](self, visitor: FinancialVisitor[T]) -> T:
        """Dispatch to the visitor method for this record's variant."""


@dataclass(frozen=True)
class InvoiceRecord(FinancialRecord):
    invoice_number: str

    def accept[T](self, visitor: FinancialVisitor[T]) -> T:
        return visitor.visit_invoice(self)


@dataclass(frozen=True)
class ReceiptRecord(FinancialRecord):
    receipt_number: str

    def accept[T](self, visitor: FinancialVisitor[T]) -> T:
        return visitor.visit_receipt(self)


@dataclass(frozen=True)
class RefundRecord(FinancialRecord):
    refund_number: str

    def accept[T](self, visitor: FinancialVisitor[T]) -> T:
        return visitor.visit_refund(self)
