"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, patternctl.toml only contains
overrides. An empty file behaves exactly like no file at all.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from patternctl.domain.money import DEFAULT_CURRENCY_SYMBOL


class CheckoutConfig(BaseModel):
    """[checkout] section."""

    model_config = {"frozen": True}

    method: str = "creditcard"
    amount: Decimal = Decimal("100.00")
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    document_format: str = "html"
    record_format: str = "csv"
