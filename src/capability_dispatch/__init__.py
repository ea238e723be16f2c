"""Convenience access to the capability dispatch core components."""

from __future__ import annotations

from typing import Any

from capability_dispatch.utils.public_api import build_module_dir, resolve_export

__all__ = [
    "Capability",
    "CapabilityBindingError",
    "CapabilityDispatcher",
    "CapabilityHandle",
    "CapabilitySet",
    "Composition",
    "OperationResult",
    "ResultPolicy",
    "attempt",
    "bind",
    "bind_all",
    "capabilities_of",
    "capability",
    "extend",
    "implements",
    "invoke",
    "invoke_concurrently",
    "verify_contract",
]

_MODULE_MAP = {
    "Capability": ("capability_dispatch.capabilities.base", "Capability"),
    "capability": ("capability_dispatch.capabilities.base", "capability"),
    "CapabilityBindingError": (
        "capability_dispatch.capabilities.exceptions",
        "CapabilityBindingError",
    ),
    "CapabilitySet": ("capability_dispatch.capabilities.configuration", "CapabilitySet"),
    "OperationResult": ("capability_dispatch.capabilities.result", "OperationResult"),
    "ResultPolicy": ("capability_dispatch.capabilities.result", "ResultPolicy"),
    "implements": ("capability_dispatch.capabilities.conformance", "implements"),
    "verify_contract": ("capability_dispatch.capabilities.conformance", "verify_contract"),
    "CapabilityDispatcher": ("capability_dispatch.dispatch.dispatcher", "CapabilityDispatcher"),
    "attempt": ("capability_dispatch.dispatch.dispatcher", "attempt"),
    "bind": ("capability_dispatch.dispatch.dispatcher", "bind"),
    "bind_all": ("capability_dispatch.dispatch.dispatcher", "bind_all"),
    "capabilities_of": ("capability_dispatch.dispatch.dispatcher", "capabilities_of"),
    "extend": ("capability_dispatch.dispatch.dispatcher", "extend"),
    "invoke": ("capability_dispatch.dispatch.dispatcher", "invoke"),
    "CapabilityHandle": ("capability_dispatch.dispatch.handle", "CapabilityHandle"),
    "Composition": ("capability_dispatch.dispatch.composition", "Composition"),
    "invoke_concurrently": ("capability_dispatch.dispatch.parallel", "invoke_concurrently"),
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
