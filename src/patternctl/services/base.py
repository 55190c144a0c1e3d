"""BaseService: common constructor for the service layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings


class BaseService:
    """Holds the frozen settings a service reads its defaults from.

    Usage::

        class PaymentService(BaseService):
            def checkout(self, method: str, amount: Decimal) -> ServiceResult:
                ...
    """

    def __init__(self, settings: PatternSettings) -> None:
        self._settings = settings
