"""Standalone commands: checkout and payment-methods (Strategy demo)."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import click

from patternctl.commands._base import DECIMAL, PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl checkout
  patternctl checkout --method paypal --amount 42.50
  patternctl --json checkout --method crypto""",
)
@click.option(
    "--method",
    default=None,
    help="Payment method key (default: [checkout] method, 'creditcard').",
)
@click.option(
    "--amount",
    type=DECIMAL,
    default=None,
    help="Amount to charge (default: [checkout] amount, 100.00).",
)
@click.pass_obj
def checkout(app: AppContext, method: str | None, amount: Decimal | None) -> None:
    """Pay an amount with the strategy registered under a method key."""
    from patternctl.services.payment import PaymentService

    if method is None:
        method = app.settings.checkout.method
    result = PaymentService(app.settings).checkout(method, amount)

    # An unknown method is reported, not fatal: checkout is skipped, exit 0.
    if result.error is not None and result.error.code == "INVALID_PAYMENT_METHOD":
        if app.settings.json_output:
            app.emit(result, fatal=False)
        else:
            click.echo(result.error.message)
        return

    app.emit_lines(result)


@click.command(
    "payment-methods",
    cls=PatternCommand,
    examples="""\
  patternctl payment-methods
  patternctl -q payment-methods""",
)
@click.pass_obj
def payment_methods(app: AppContext) -> None:
    """List the registered payment method keys and their strategies."""
    from patternctl.services.payment import PaymentService

    app.emit(PaymentService(app.settings).list_methods())
