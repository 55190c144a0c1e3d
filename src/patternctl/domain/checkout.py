"""CheckoutService: the Strategy pattern context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patternctl.domain.money import DEFAULT_CURRENCY_SYMBOL

if TYPE_CHECKING:
    from decimal import Decimal

    from patternctl.domain.payments import PaymentStrategy


class CheckoutService:
    """Delegates every checkout to the strategy chosen at construction.

    The strategy cannot be swapped afterwards; build a new service to
    pay another way. Amounts are not validated: zero and negative
    amounts are passed through to the strategy unchanged.
    """

    def __init__(
        self,
        payment_strategy: PaymentStrategy,
        *,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ) -> None:
        self._payment_strategy = payment_strategy
        self._currency_symbol = currency_symbol

    @property
    def payment_strategy(self) -> PaymentStrategy:
        return self._payment_strategy

    def checkout(self, amount: Decimal) -> str:
        """Process *amount* with the held strategy and return its confirmation line."""
        return self._payment_strategy.process_payment(amount, symbol=self._currency_symbol)
