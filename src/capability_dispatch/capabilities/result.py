"""Explicit operation outcomes and the policies drivers apply to them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from capability_dispatch.logging import get_logger

from .exceptions import OperationAbortedError

ValueT = TypeVar("ValueT")

logger = get_logger("capabilities.result")


class OperationStatus(Enum):
    OK = "ok"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


class ResultPolicy(Enum):
    """How a driver reacts to an operation that did not succeed."""

    SKIP = "skip"
    LOG = "log"
    ABORT = "abort"

    @classmethod
    def coerce(cls, value: "ResultPolicy | str") -> "ResultPolicy":
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


@dataclass(frozen=True, slots=True)
class OperationResult(Generic[ValueT]):
    """Outcome of a single operation; failures are values, not exceptions."""

    status: OperationStatus
    value: ValueT | None = None
    reason: str | None = None

    @classmethod
    def success(cls, value: ValueT | None = None) -> "OperationResult[ValueT]":
        return cls(OperationStatus.OK, value)

    @classmethod
    def unsupported(cls, reason: str) -> "OperationResult[Any]":
        return cls(OperationStatus.UNSUPPORTED, reason=reason)

    @classmethod
    def failure(cls, reason: str) -> "OperationResult[Any]":
        return cls(OperationStatus.FAILED, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.OK

    def unwrap(self) -> ValueT | None:
        """
        Return the value of a successful result.

        Raises:
            ValueError: If the result is not successful.
        """
        if not self.ok:
            raise ValueError(
                f"cannot unwrap {self.status.value} result: {self.reason}"
            )
        return self.value


def apply_policy(
    result: OperationResult[Any],
    policy: ResultPolicy | str,
    *,
    operation: str,
    target: str | None = None,
) -> bool:
    """
    Apply a driver policy to an operation result.

    Parameters:
        result: Outcome returned by the operation.
        policy: ``skip`` ignores the result, ``log`` records a warning,
            ``abort`` raises.
        operation: Operation name used in log records and errors.
        target: Optional name of the variant that produced the result.

    Returns:
        bool: True when the result was successful, False when it was skipped or logged.

    Raises:
        OperationAbortedError: If the result failed and the policy is ``abort``.
    """
    if result.ok:
        return True
    resolved = ResultPolicy.coerce(policy)
    if resolved is ResultPolicy.ABORT:
        raise OperationAbortedError(operation, result)
    if resolved is ResultPolicy.LOG:
        logger.warning(
            "operation did not succeed",
            context={
                "operation": operation,
                "target": target,
                "status": result.status.value,
                "reason": result.reason,
            },
        )
    return False
