"""Payment strategies and the key-based strategy registry.

Each strategy is stateless and turns an amount into a single
confirmation line. Strategies are registered once under a
:class:`~patternctl.domain.types.PaymentMethod` key and resolved by the
raw string key a caller supplies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from patternctl.domain.money import DEFAULT_CURRENCY_SYMBOL, format_currency
from patternctl.domain.types import PaymentMethod


class UnknownPaymentMethodError(LookupError):
    """Raised when no strategy is registered under the requested key."""

    def __init__(self, key: str, valid: list[str]) -> None:
        super().__init__(f"No payment strategy registered for {key!r}")
        self.key = key
        self.valid = valid


class PaymentStrategy(ABC):
    """Interchangeable payment algorithm."""

    @abstractmethod
    def process_payment(self, amount: Decimal, *, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        """Process *amount* and return the confirmation line."""


class CreditCardPaymentStrategy(PaymentStrategy):
    def process_payment(self, amount: Decimal, *, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        return f"Processing credit card payment of {format_currency(amount, symbol=symbol)}"


class PayPalPaymentStrategy(PaymentStrategy):
    def process_payment(self, amount: Decimal, *, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        return f"Processing PayPal payment of {format_currency(amount, symbol=symbol)}"


class CryptoPaymentStrategy(PaymentStrategy):
    def process_payment(self, amount: Decimal, *, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
        return f"Processing cryptocurrency payment of {format_currency(amount, symbol=symbol)}"


# Insertion order is the listing order.
PAYMENT_STRATEGIES: Mapping[PaymentMethod, PaymentStrategy] = MappingProxyType(
    {
        PaymentMethod.CREDIT_CARD: CreditCardPaymentStrategy(),
        PaymentMethod.PAYPAL: PayPalPaymentStrategy(),
        PaymentMethod.CRYPTO: CryptoPaymentStrategy(),
    }
)


def resolve_payment_strategy(key: str) -> PaymentStrategy:
    """Return the strategy registered under *key*.

    Matching is exact and case-sensitive.

    Raises:
        UnknownPaymentMethodError: If nothing is registered under *key*.
    """
    try:
        method = PaymentMethod(key)
    except ValueError:
        raise UnknownPaymentMethodError(key, [str(m) for m in PAYMENT_STRATEGIES]) from None
    return PAYMENT_STRATEGIES[method]
