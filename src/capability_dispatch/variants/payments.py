"""Payment services used by the purchase example."""

from __future__ import annotations

from dataclasses import dataclass, field

from capability_dispatch.capabilities.builtin import Chargeable
from capability_dispatch.capabilities.conformance import implements
from capability_dispatch.capabilities.result import OperationResult
from capability_dispatch.logging import get_logger

logger = get_logger("variants.payments")


@dataclass(frozen=True, slots=True)
class Payer:
    name: str


@dataclass(frozen=True, slots=True)
class Charge:
    processor: str
    payer: Payer
    amount: int


@dataclass
class _PaymentProcessor:
    processor: str = ""
    charges: list[Charge] = field(default_factory=list)

    def charge(self, payer: Payer, amount: int) -> OperationResult[Charge]:
        if amount <= 0:
            return OperationResult.failure("amount must be positive")
        record = Charge(self.processor, payer, amount)
        self.charges.append(record)
        logger.info(
            "charge processed",
            context={"processor": self.processor, "payer": payer.name, "amount": amount},
        )
        return OperationResult.success(record)


@implements(Chargeable)
@dataclass
class Stripe(_PaymentProcessor):
    processor: str = "stripe"


@implements(Chargeable)
@dataclass
class PayPal(_PaymentProcessor):
    processor: str = "paypal"


__all__ = ["Charge", "Payer", "PayPal", "Stripe"]
