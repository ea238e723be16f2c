"""Dispatch package exports."""

from __future__ import annotations

from typing import Any

from capability_dispatch.utils.public_api import build_module_dir, resolve_export

__all__ = [
    "CapabilityDispatcher",
    "CapabilityHandle",
    "Composition",
    "DefaultOperationAdapter",
    "LoggingObservability",
    "attempt",
    "bind",
    "bind_all",
    "capabilities_of",
    "extend",
    "invoke",
    "invoke_concurrently",
    "with_observability",
]

_MODULE_MAP = {
    "CapabilityDispatcher": "capability_dispatch.dispatch.dispatcher",
    "attempt": "capability_dispatch.dispatch.dispatcher",
    "bind": "capability_dispatch.dispatch.dispatcher",
    "bind_all": "capability_dispatch.dispatch.dispatcher",
    "capabilities_of": "capability_dispatch.dispatch.dispatcher",
    "extend": "capability_dispatch.dispatch.dispatcher",
    "invoke": "capability_dispatch.dispatch.dispatcher",
    "CapabilityHandle": "capability_dispatch.dispatch.handle",
    "DefaultOperationAdapter": "capability_dispatch.dispatch.handle",
    "Composition": "capability_dispatch.dispatch.composition",
    "LoggingObservability": "capability_dispatch.dispatch.observability",
    "with_observability": "capability_dispatch.dispatch.observability",
    "invoke_concurrently": "capability_dispatch.dispatch.parallel",
}


def __getattr__(name: str) -> Any:
    return resolve_export(
        name,
        module_all=__all__,
        module_map=_MODULE_MAP,
        module_globals=globals(),
    )


def __dir__() -> list[str]:
    return build_module_dir(module_all=__all__, module_globals=globals())
