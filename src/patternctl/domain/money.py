"""Currency formatting for payment confirmations."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

DEFAULT_CURRENCY_SYMBOL = "$"

_CENTS = Decimal("0.01")


def format_currency(amount: Decimal, *, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format *amount* as a currency string.

    Two decimals, half-up rounding, thousands separators, and a leading
    minus for negative amounts::

        >>> format_currency(Decimal("1234.5"))
        '$1,234.50'
        >>> format_currency(Decimal("-5"))
        '-$5.00'

    Any finite amount is accepted, however many integer digits it has.
    """
    amount = Decimal(amount)
    with localcontext() as ctx:
        # Integer digits plus cents must fit the working precision.
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        quantized = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if quantized < 0 else ""
        return f"{sign}{symbol}{abs(quantized):,.2f}"
