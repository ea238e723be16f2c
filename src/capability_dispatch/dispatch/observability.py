"""Logging-based observability hooks wrapped around dispatched operations."""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar

from capability_dispatch.logging import get_logger

ResultT = TypeVar("ResultT")


class ObservabilityHooks(Protocol):
    """Callbacks invoked around each dispatched operation."""

    def before_operation(
        self, *, operation: str, target: object, payload: dict[str, Any]
    ) -> None: ...

    def after_operation(
        self,
        *,
        operation: str,
        target: object,
        payload: dict[str, Any],
        result: Any,
    ) -> None: ...

    def on_error(
        self,
        *,
        operation: str,
        target: object,
        payload: dict[str, Any],
        error: Exception,
    ) -> None: ...


class LoggingObservability:
    """Record operation lifecycle events using the shared logger."""

    def __init__(self) -> None:
        self._logger = get_logger("dispatch.observability")

    def before_operation(
        self,
        *,
        operation: str,
        target: object,
        payload: dict[str, Any],
    ) -> None:
        self._logger.debug(
            "operation start",
            context=self._context(operation, target, payload),
        )

    def after_operation(
        self,
        *,
        operation: str,
        target: object,
        payload: dict[str, Any],
        result: Any,
    ) -> None:
        context = self._context(operation, target, payload)
        context["result_type"] = type(result).__name__
        self._logger.debug("operation end", context=context)

    def on_error(
        self,
        *,
        operation: str,
        target: object,
        payload: dict[str, Any],
        error: Exception,
    ) -> None:
        context = self._context(operation, target, payload)
        context["error"] = repr(error)
        self._logger.error("operation error", context=context)

    def _context(
        self,
        operation: str,
        target: object,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        return {
            "operation": operation,
            "target": type(target).__name__,
            "payload_keys": sorted(payload.keys()),
        }


def with_observability(
    hooks: ObservabilityHooks | None,
    *,
    operation: str,
    target: object,
    payload: dict[str, Any],
    func: Callable[[], ResultT],
) -> ResultT:
    """Invoke func while emitting observability events when hooks are configured."""
    if hooks is None:
        return func()
    safe_payload = dict(payload)
    hooks.before_operation(operation=operation, target=target, payload=safe_payload)
    try:
        result = func()
    except Exception as exc:
        hooks.on_error(
            operation=operation,
            target=target,
            payload=safe_payload,
            error=exc,
        )
        raise
    hooks.after_operation(
        operation=operation,
        target=target,
        payload=safe_payload,
        result=result,
    )
    return result


__all__ = ["LoggingObservability", "ObservabilityHooks", "with_observability"]
