"""Registry keys and export format enums."""

from __future__ import annotations

from enum import StrEnum


class PaymentMethod(StrEnum):
    """Keys under which payment strategies are registered."""

    CREDIT_CARD = "creditcard"
    PAYPAL = "paypal"
    CRYPTO = "crypto"


class DocumentFormat(StrEnum):
    """Output formats available for document elements."""

    HTML = "html"
    MARKDOWN = "markdown"


class RecordFormat(StrEnum):
    """Output formats available for financial records."""

    CSV = "csv"
    JSON = "json"
