"""Load and persist settings through separate loader and persister capabilities."""

from __future__ import annotations

from typing import Any, Iterable

from django.conf import settings

from capability_dispatch.capabilities.builtin import Loadable, Persistable
from capability_dispatch.capabilities.result import (
    OperationResult,
    ResultPolicy,
    apply_policy,
)
from capability_dispatch.config import result_policy
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher
from capability_dispatch.dispatch.handle import CapabilityHandle
from capability_dispatch.logging import get_logger

logger = get_logger("drivers.settings")


class SettingsManager:
    """
    Load every loader and persist every persister.

    Read-only settings are simply never registered as persisters, so saving
    needs no special cases. Non-successful results are handled by ``policy``.
    """

    def __init__(
        self,
        loaders: Iterable[Any],
        persisters: Iterable[Any] = (),
        *,
        policy: ResultPolicy | str | None = None,
        dispatcher: CapabilityDispatcher | None = None,
        django_settings: Any = settings,
    ) -> None:
        self._dispatcher = dispatcher or CapabilityDispatcher(
            django_settings=django_settings
        )
        self._loaders = [self._dispatcher.bind(item, Loadable) for item in loaders]
        self._persisters = [
            self._dispatcher.bind(item, Persistable) for item in persisters
        ]
        self.policy = ResultPolicy.coerce(
            policy if policy is not None else result_policy(django_settings)
        )

    def load_all(self) -> list[OperationResult[Any]]:
        return self._run(self._loaders, "load")

    def save_all(self) -> list[OperationResult[Any]]:
        return self._run(self._persisters, "persist")

    def _run(
        self, handles: list[CapabilityHandle[Any]], operation: str
    ) -> list[OperationResult[Any]]:
        results: list[OperationResult[Any]] = []
        for handle in handles:
            result = self._dispatcher.attempt(handle, operation)
            apply_policy(
                result,
                self.policy,
                operation=operation,
                target=type(handle.variant).__name__,
            )
            results.append(result)
        logger.debug(
            "settings operation finished",
            context={
                "operation": operation,
                "total": len(results),
                "succeeded": sum(1 for result in results if result.ok),
            },
        )
        return results
