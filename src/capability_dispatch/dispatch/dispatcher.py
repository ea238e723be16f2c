"""Route operations to variants purely through capability-typed handles."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from django.conf import settings

from capability_dispatch.capabilities.base import (
    Capability,
    CapabilityLike,
    DefaultBody,
    capability_of,
)
from capability_dispatch.capabilities.configuration import (
    CapabilityEntry,
    flatten_capabilities,
)
from capability_dispatch.capabilities.conformance import ensure_conformance
from capability_dispatch.capabilities.exceptions import UnknownOperationError
from capability_dispatch.capabilities.registry import (
    CapabilityRegistry,
    default_registry,
)
from capability_dispatch.capabilities.result import OperationResult
from capability_dispatch.config import observability_enabled, signature_checks_enabled
from capability_dispatch.logging import get_logger

from .handle import CapabilityHandle, DefaultOperationAdapter
from .observability import LoggingObservability, ObservabilityHooks, with_observability

logger = get_logger("dispatch.dispatcher")


def _require_handle(handle: Any, caller: str) -> None:
    if not isinstance(handle, CapabilityHandle):
        raise TypeError(
            f"{caller} expects a CapabilityHandle, got {type(handle).__name__}"
        )


class CapabilityDispatcher:
    """
    Bind variants to capabilities and invoke operations through the resulting handles.

    The dispatcher holds configuration only. Every piece of state lives in the
    variants it dispatches to.
    """

    def __init__(
        self,
        *,
        django_settings: Any = settings,
        observability: ObservabilityHooks | None = None,
        check_signatures: bool | None = None,
        registry: CapabilityRegistry | None = None,
    ) -> None:
        self._registry = registry or default_registry
        if observability is None and observability_enabled(django_settings):
            observability = LoggingObservability()
        self._observability = observability
        self._check_signatures = (
            signature_checks_enabled(django_settings)
            if check_signatures is None
            else check_signatures
        )

    @property
    def observability(self) -> ObservabilityHooks | None:
        return self._observability

    def bind(self, variant: Any, capability: CapabilityLike) -> CapabilityHandle[Any]:
        """
        Bind a variant to a capability.

        When the variant's class declared conformance (see ``implements``),
        operations it leaves out that the capability covers with a default are
        filled by wrapping it in a :class:`DefaultOperationAdapter`. Variants
        that never declared the capability must provide every operation
        themselves. Passing an existing handle rebinds its underlying variant, so
        calls through the returned handle always go through this dispatcher.

        Raises:
            CapabilityBindingError: If the variant does not implement every
                operation of the capability.
        """
        spec = capability_of(capability)
        if isinstance(variant, CapabilityHandle):
            if variant.capability is spec:
                if variant.invoker == self.invoke:
                    return variant
                return CapabilityHandle(variant.variant, spec, invoker=self.invoke)
            variant = variant.variant
        if isinstance(variant, DefaultOperationAdapter):
            variant = variant.wrapped
        target = variant
        declared = self._declares(variant, spec)
        defaulted = spec.defaulted_operations(variant) if declared else ()
        if defaulted:
            target = DefaultOperationAdapter(
                variant, {name: spec.defaults[name] for name in defaulted}
            )
        ensure_conformance(
            target,
            spec,
            check_signatures=self._check_signatures,
            allow_defaults=False,
        )
        logger.debug(
            "capability bound",
            context={
                "capability": spec.name,
                "variant": type(variant).__name__,
                "defaulted": list(defaulted),
            },
        )
        return CapabilityHandle(target, spec, invoker=self.invoke)

    def _declares(self, variant: Any, spec: Capability) -> bool:
        return spec.name in self._registry.get(type(variant))

    def bind_all(
        self, variant: Any, *capabilities: CapabilityEntry
    ) -> Mapping[str, CapabilityHandle[Any]]:
        """Bind one variant to several capabilities, keyed by capability name."""
        return MappingProxyType(
            {
                spec.name: self.bind(variant, spec)
                for spec in flatten_capabilities(capabilities)
            }
        )

    def invoke(
        self,
        handle: CapabilityHandle[Any],
        operation: str,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """
        Perform ``operation`` on the variant behind ``handle``.

        Raises:
            TypeError: If ``handle`` was not produced by :meth:`bind`.
            UnknownOperationError: If the capability does not declare ``operation``.
        """
        _require_handle(handle, "invoke")
        spec = handle.capability
        spec.operation(operation)
        implementation = getattr(handle.variant, operation)
        return with_observability(
            self._observability,
            operation=f"{spec.name}.{operation}",
            target=handle.variant,
            payload={"args": args, "kwargs": kwargs},
            func=lambda: implementation(*args, **kwargs),
        )

    def attempt(
        self,
        handle: CapabilityHandle[Any],
        operation: str,
        *args: Any,
        **kwargs: Any,
    ) -> OperationResult[Any]:
        """
        Invoke an operation and report the outcome as an :class:`OperationResult`.

        Results the operation already returns as ``OperationResult`` pass through
        unchanged; plain return values become successes; exceptions raised by
        the variant become failures.

        Raises:
            TypeError: If ``handle`` was not produced by :meth:`bind`.
            UnknownOperationError: If the capability does not declare ``operation``.
        """
        _require_handle(handle, "attempt")
        try:
            value = self.invoke(handle, operation, *args, **kwargs)
        except UnknownOperationError:
            raise
        except Exception as exc:
            logger.warning(
                "operation raised",
                context={
                    "capability": handle.capability.name,
                    "operation": operation,
                    "error": type(exc).__name__,
                },
            )
            return OperationResult.failure(f"{type(exc).__name__}: {exc}")
        if isinstance(value, OperationResult):
            return value
        return OperationResult.success(value)

    def extend(
        self, capability: CapabilityLike, operation: str, body: DefaultBody
    ) -> Capability:
        """Return ``capability`` with ``body`` as the default for ``operation``."""
        return capability_of(capability).with_default(operation, body)

    def capabilities_of(
        self, variant: Any, *, registry: CapabilityRegistry | None = None
    ) -> frozenset[str]:
        """Names of registered capabilities the variant satisfies structurally."""
        source = registry or self._registry
        return frozenset(
            spec.name
            for spec in source.capabilities()
            if spec.satisfied_by(
                variant,
                check_signatures=self._check_signatures,
                allow_defaults=self._declares(variant, spec),
            )
        )


def bind(variant: Any, capability: CapabilityLike) -> CapabilityHandle[Any]:
    return CapabilityDispatcher().bind(variant, capability)


def bind_all(
    variant: Any, *capabilities: CapabilityEntry
) -> Mapping[str, CapabilityHandle[Any]]:
    return CapabilityDispatcher().bind_all(variant, *capabilities)


def invoke(handle: CapabilityHandle[Any], operation: str, *args: Any, **kwargs: Any) -> Any:
    return CapabilityDispatcher().invoke(handle, operation, *args, **kwargs)


def attempt(
    handle: CapabilityHandle[Any], operation: str, *args: Any, **kwargs: Any
) -> OperationResult[Any]:
    return CapabilityDispatcher().attempt(handle, operation, *args, **kwargs)


def extend(capability: CapabilityLike, operation: str, body: DefaultBody) -> Capability:
    return capability_of(capability).with_default(operation, body)


def capabilities_of(variant: Any) -> frozenset[str]:
    return CapabilityDispatcher().capabilities_of(variant)


__all__ = [
    "CapabilityDispatcher",
    "attempt",
    "bind",
    "bind_all",
    "capabilities_of",
    "extend",
    "invoke",
]
