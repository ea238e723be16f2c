"""Composition-time conformance checks for variants."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable, TypeVar

from capability_dispatch.config import signature_checks_enabled
from capability_dispatch.logging import get_logger

from .base import Capability, CapabilityLike, capability_of
from .configuration import CapabilityEntry, flatten_capabilities
from .exceptions import CapabilityBindingError, CapabilityContractError
from .registry import CapabilityRegistry, default_registry

VariantT = TypeVar("VariantT", bound=type)

logger = get_logger("capabilities.conformance")


def _variant_name(variant: Any) -> str:
    if isinstance(variant, type):
        return variant.__name__
    return type(variant).__name__


def ensure_conformance(
    variant: Any,
    capability: CapabilityLike,
    *,
    check_signatures: bool = True,
    allow_defaults: bool = True,
) -> Capability:
    """
    Validate that ``variant`` fully implements ``capability``.

    Works on instances and on classes; for classes the check runs against the
    methods as declared, so it can happen at class-definition time. Operations
    covered by a capability default only count as present when ``allow_defaults``
    is True.

    Returns:
        Capability: The resolved capability.

    Raises:
        CapabilityBindingError: If an operation is missing or cannot be called
            with the declared arguments.
    """
    spec = capability_of(capability)
    missing = spec.missing_operations(variant, allow_defaults=allow_defaults)
    if missing:
        raise CapabilityBindingError(
            spec.name,
            f"{_variant_name(variant)} is missing operations: {', '.join(missing)}",
        )
    if check_signatures:
        incompatible = spec.incompatible_operations(variant)
        if incompatible:
            raise CapabilityBindingError(
                spec.name,
                f"{_variant_name(variant)} has incompatible signatures for: "
                f"{', '.join(incompatible)}",
            )
    return spec


def _no_argument_factory(variant_cls: type) -> Callable[[], Any] | None:
    """Return ``variant_cls`` itself when it can be constructed without arguments."""
    try:
        inspect.signature(variant_cls).bind()
    except (TypeError, ValueError):
        return None
    return variant_cls


def implements(
    *capabilities: CapabilityEntry,
    registry: CapabilityRegistry | None = None,
    check_signatures: bool | None = None,
    factory: Callable[[], Any] | None = None,
) -> Callable[[VariantT], VariantT]:
    """
    Class decorator declaring that a variant class satisfies the given capabilities.

    Conformance is validated when the class is created, so a variant missing
    an operation fails at import time instead of inside a driver. Capabilities
    carrying behavioural contracts are also verified then, against instances
    built by ``factory`` or by calling the class without arguments. Classes
    that need constructor arguments and get no ``factory`` skip that step.

    Raises:
        CapabilityBindingError: If an operation is missing or has an unusable signature.
        CapabilityContractError: If the class breaks a capability's contract.
    """
    target_registry = registry or default_registry

    def decorator(variant_cls: VariantT) -> VariantT:
        check = (
            signature_checks_enabled() if check_signatures is None else check_signatures
        )
        resolved = flatten_capabilities(capabilities)
        for spec in resolved:
            ensure_conformance(variant_cls, spec, check_signatures=check)
        build = factory or _no_argument_factory(variant_cls)
        for spec in resolved:
            if not spec.contracts:
                continue
            if build is None:
                logger.debug(
                    "contract checks skipped",
                    context={"variant": variant_cls.__name__, "capability": spec.name},
                )
                continue
            verify_contract(spec, build)
        target_registry.register(variant_cls, (spec.name for spec in resolved))
        logger.debug(
            "variant conformance declared",
            context={
                "variant": variant_cls.__name__,
                "capabilities": [spec.name for spec in resolved],
            },
        )
        return variant_cls

    return decorator


def verify_contract(
    capability: CapabilityLike,
    factory: Callable[[], Any],
    *,
    checks: Iterable[Callable[[Any], bool]] = (),
) -> bool:
    """
    Run the behavioural contract checks of a capability against fresh variants.

    Each check receives its own instance from ``factory`` so checks cannot
    influence each other.

    Returns:
        bool: True when every check passed.

    Raises:
        CapabilityBindingError: If the produced variant does not implement the capability.
        CapabilityContractError: On the first failing check.
    """
    spec = capability_of(capability)
    for check in (*spec.contracts, *checks):
        variant = factory()
        ensure_conformance(variant, spec, allow_defaults=False)
        if not check(variant):
            check_name = getattr(check, "__name__", repr(check))
            logger.warning(
                "capability contract violated",
                context={
                    "capability": spec.name,
                    "variant": _variant_name(variant),
                    "check": check_name,
                },
            )
            raise CapabilityContractError(spec.name, _variant_name(variant), check_name)
    return True


__all__ = ["ensure_conformance", "implements", "verify_contract"]
