"""Purchase flow that charges through any payment service."""

from __future__ import annotations

from typing import Any

from capability_dispatch.capabilities.builtin import Chargeable
from capability_dispatch.capabilities.result import OperationResult
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher
from capability_dispatch.logging import get_logger

logger = get_logger("drivers.purchase")


class Purchase:
    def __init__(
        self,
        service: Any,
        amount: int,
        *,
        dispatcher: CapabilityDispatcher | None = None,
    ) -> None:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        self._dispatcher = dispatcher or CapabilityDispatcher()
        self._service = self._dispatcher.bind(service, Chargeable)
        self.amount = amount

    def charge(self, payer: Any) -> OperationResult[Any]:
        """Charge ``payer`` for the purchase amount; the outcome is always a result value."""
        result = self._dispatcher.attempt(self._service, "charge", payer, self.amount)
        logger.info(
            "purchase charged",
            context={"amount": self.amount, "status": result.status.value},
        )
        return result
