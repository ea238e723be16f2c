"""Capability-typed handles and the adapter that applies default operations."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Generic, Mapping, TypeVar

from capability_dispatch.capabilities.base import Capability, DefaultBody
from capability_dispatch.capabilities.exceptions import UnknownOperationError

VariantT = TypeVar("VariantT")

Invoker = Callable[..., Any]


def _direct_invoke(
    handle: "CapabilityHandle[Any]", operation: str, *args: Any, **kwargs: Any
) -> Any:
    return getattr(handle.variant, operation)(*args, **kwargs)


class CapabilityHandle(Generic[VariantT]):
    """
    View of a variant restricted to the operations of one capability.

    Attribute access only resolves declared operations; everything else the
    variant offers stays out of reach of the driver holding the handle.
    """

    __slots__ = ("_variant", "_capability", "_invoker")

    def __init__(
        self,
        variant: VariantT,
        capability: Capability,
        invoker: Invoker | None = None,
    ) -> None:
        self._variant = variant
        self._capability = capability
        self._invoker = invoker or _direct_invoke

    @property
    def variant(self) -> VariantT:
        return self._variant

    @property
    def capability(self) -> Capability:
        return self._capability

    @property
    def invoker(self) -> Invoker:
        return self._invoker

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("__"):
            raise AttributeError(name)
        if name not in self._capability.operation_names:
            raise UnknownOperationError(self._capability.name, name)
        return partial(self._invoker, self, name)

    def __dir__(self) -> list[str]:
        return sorted({"variant", "capability", *self._capability.operation_names})

    def __repr__(self) -> str:
        return (
            f"<CapabilityHandle {self._capability.name} -> "
            f"{type(self._variant).__name__}>"
        )


class DefaultOperationAdapter:
    """
    Wrap a variant and supply capability-level defaults for operations it lacks.

    The wrapped object is never modified; default bodies receive it as their
    first argument.
    """

    def __init__(self, wrapped: Any, defaults: Mapping[str, DefaultBody]) -> None:
        self._wrapped = wrapped
        self._defaults = dict(defaults)

    @property
    def wrapped(self) -> Any:
        return self._wrapped

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._defaults:
            return partial(self._defaults[name], self._wrapped)
        return getattr(self._wrapped, name)

    def __repr__(self) -> str:
        return f"<DefaultOperationAdapter {type(self._wrapped).__name__} {sorted(self._defaults)}>"


__all__ = ["CapabilityHandle", "DefaultOperationAdapter"]
