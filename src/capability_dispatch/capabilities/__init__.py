"""Capability package exports."""

from __future__ import annotations

from typing import Any

from capability_dispatch.utils.public_api import build_module_dir, resolve_export

__all__ = [
    "Capability",
    "CapabilityBindingError",
    "CapabilityContractError",
    "CapabilityError",
    "CapabilityRegistry",
    "CapabilitySet",
    "CompositionError",
    "OperationAbortedError",
    "OperationResult",
    "OperationSpec",
    "OperationStatus",
    "ResultPolicy",
    "UnknownOperationError",
    "apply_policy",
    "capability",
    "capability_of",
    "default_registry",
    "ensure_conformance",
    "flatten_capabilities",
    "implements",
    "verify_contract",
]

_MODULE_MAP = {
    "Capability": "capability_dispatch.capabilities.base",
    "OperationSpec": "capability_dispatch.capabilities.base",
    "capability": "capability_dispatch.capabilities.base",
    "capability_of": "capability_dispatch.capabilities.base",
    "CapabilityBindingError": "capability_dispatch.capabilities.exceptions",
    "CapabilityContractError": "capability_dispatch.capabilities.exceptions",
    "CapabilityError": "capability_dispatch.capabilities.exceptions",
    "CompositionError": "capability_dispatch.capabilities.exceptions",
    "OperationAbortedError": "capability_dispatch.capabilities.exceptions",
    "UnknownOperationError": "capability_dispatch.capabilities.exceptions",
    "CapabilityRegistry": "capability_dispatch.capabilities.registry",
    "default_registry": "capability_dispatch.capabilities.registry",
    "CapabilitySet": "capability_dispatch.capabilities.configuration",
    "flatten_capabilities": "capability_dispatch.capabilities.configuration",
    "OperationResult": "capability_dispatch.capabilities.result",
    "OperationStatus": "capability_dispatch.capabilities.result",
    "ResultPolicy": "capability_dispatch.capabilities.result",
    "apply_policy": "capability_dispatch.capabilities.result",
    "ensure_conformance": "capability_dispatch.capabilities.conformance",
    "implements": "capability_dispatch.capabilities.conformance",
    "verify_contract": "capability_dispatch.capabilities.conformance",
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
