"""PaymentService: resolve a payment strategy and run a checkout."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import structlog

from patternctl.domain.checkout import CheckoutService
from patternctl.domain.payments import (
    PAYMENT_STRATEGIES,
    UnknownPaymentMethodError,
    resolve_payment_strategy,
)
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult
from patternctl.services.telemetry import stage, traced

log = structlog.get_logger(__name__)

INVALID_PAYMENT_METHOD_MESSAGE = "Invalid payment method selected."


class PaymentService(BaseService):
    """Strategy-pattern operations: checkout and registry listing."""

    @traced
    def checkout(self, method: str, amount: Decimal | None = None) -> ServiceResult:
        """Pay *amount* (default: configured amount) with the strategy under *method*.

        An unknown *method* fails with ``INVALID_PAYMENT_METHOD`` and no
        checkout takes place. Non-positive amounts are processed and
        reported as a warning.
        """
        config = self._settings.checkout
        if amount is None:
            amount = config.amount

        try:
            strategy = resolve_payment_strategy(method)
        except UnknownPaymentMethodError as exc:
            log.debug("checkout.unknown_method", method=method, valid=exc.valid)
            return ServiceResult.failure(
                "checkout",
                "INVALID_PAYMENT_METHOD",
                INVALID_PAYMENT_METHOD_MESSAGE,
                method=method,
                valid=exc.valid,
            )

        log.debug("checkout.resolved", method=method, strategy=type(strategy).__name__)
        warnings: list[str] = []
        if amount <= 0:
            warnings.append(f"Non-positive amount processed: {amount}")

        service = CheckoutService(strategy, currency_symbol=config.currency_symbol)
        with stage("checkout.process") as step:
            line = service.checkout(amount)
            if step:
                step.annotate("strategy", type(strategy).__name__)

        return ServiceResult(
            ok=True,
            op="checkout",
            data={
                "method": method,
                "amount": str(amount),
                "lines": [line],
            },
            warnings=warnings,
        )

    @traced
    def list_methods(self) -> ServiceResult:
        """List registered payment methods with a sample confirmation line each."""
        config = self._settings.checkout
        items: list[dict[str, Any]] = []
        for method, strategy in PAYMENT_STRATEGIES.items():
            items.append(
                {
                    "id": str(method),
                    "strategy": type(strategy).__name__,
                    "sample": strategy.process_payment(
                        config.amount, symbol=config.currency_symbol
                    ),
                }
            )
        return ServiceResult(
            ok=True,
            op="list_payment_methods",
            data={"items": items, "count": len(items)},
        )
