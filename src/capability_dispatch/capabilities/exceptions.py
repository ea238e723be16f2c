"""Capability-specific exception types."""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .result import OperationResult


class CapabilityError(RuntimeError):
    """Base class for all errors raised by the dispatch layer."""


class CapabilityBindingError(CapabilityError):
    """Raised when a variant cannot be bound to a capability."""

    def __init__(self, capability_name: str, reason: str) -> None:
        self.capability_name = capability_name
        self.reason = reason
        message = f"Capability '{capability_name}' could not be bound: {reason}"
        super().__init__(message)


class CapabilityContractError(CapabilityError):
    """Raised when a variant exposes the operations but breaks the behavioural contract."""

    def __init__(self, capability_name: str, variant_name: str, check_name: str) -> None:
        self.capability_name = capability_name
        self.variant_name = variant_name
        self.check_name = check_name
        message = (
            f"'{variant_name}' violates the '{capability_name}' contract "
            f"(check '{check_name}' failed)"
        )
        super().__init__(message)


class CompositionError(CapabilityError):
    """Raised when one or more bindings of a composition are invalid."""

    def __init__(self, errors: Iterable[CapabilityBindingError]) -> None:
        self.errors = tuple(errors)
        lines = "\n".join(f"- {error}" for error in self.errors)
        super().__init__(f"Composition has {len(self.errors)} invalid binding(s):\n{lines}")


class UnknownOperationError(CapabilityError, AttributeError):
    """Raised when a handle is asked for an operation its capability does not declare."""

    def __init__(self, capability_name: str, operation: str) -> None:
        self.capability_name = capability_name
        self.operation = operation
        super().__init__(
            f"Capability '{capability_name}' has no operation '{operation}'"
        )


class OperationAbortedError(CapabilityError):
    """Raised by a driver applying the ``abort`` policy to a non-successful result."""

    def __init__(self, operation: str, result: "OperationResult") -> None:
        self.operation = operation
        self.result = result
        super().__init__(
            f"Operation '{operation}' aborted with status '{result.status.value}': "
            f"{result.reason or 'no reason given'}"
        )
