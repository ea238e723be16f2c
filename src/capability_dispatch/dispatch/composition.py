"""Validate every binding of a program before any driver runs."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from capability_dispatch.capabilities.base import Capability, CapabilityLike, capability_of
from capability_dispatch.capabilities.exceptions import (
    CapabilityBindingError,
    CompositionError,
)
from capability_dispatch.logging import get_logger

from .dispatcher import CapabilityDispatcher
from .handle import CapabilityHandle

logger = get_logger("dispatch.composition")


class Composition:
    """
    Collect named ``(variant, capability)`` bindings and resolve them together.

    Every binding is attempted before any handle is handed out, so all
    capability mismatches are reported at once in a single
    :class:`CompositionError`.
    """

    def __init__(self, dispatcher: CapabilityDispatcher | None = None) -> None:
        self._dispatcher = dispatcher or CapabilityDispatcher()
        self._entries: dict[str, tuple[Any, Capability]] = {}

    def add(self, name: str, variant: Any, capability: CapabilityLike) -> "Composition":
        """
        Register a binding under ``name``.

        Raises:
            ValueError: If ``name`` is already used in this composition.
        """
        if name in self._entries:
            raise ValueError(f"Binding '{name}' is already part of the composition")
        self._entries[name] = (variant, capability_of(capability))
        return self

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _resolve(
        self,
    ) -> tuple[dict[str, CapabilityHandle[Any]], list[CapabilityBindingError]]:
        handles: dict[str, CapabilityHandle[Any]] = {}
        errors: list[CapabilityBindingError] = []
        for name, (variant, spec) in self._entries.items():
            try:
                handles[name] = self._dispatcher.bind(variant, spec)
            except CapabilityBindingError as exc:
                errors.append(exc)
        return handles, errors

    def errors(self) -> tuple[CapabilityBindingError, ...]:
        """Return every binding error without raising."""
        return tuple(self._resolve()[1])

    def validate(self) -> None:
        """
        Check every binding without handing out handles.

        Raises:
            CompositionError: If any binding is invalid.
        """
        self.build()

    def build(self) -> Mapping[str, CapabilityHandle[Any]]:
        """
        Bind every entry and return the handles keyed by binding name.

        Raises:
            CompositionError: Listing every invalid binding.
        """
        handles, errors = self._resolve()
        if errors:
            logger.warning(
                "composition rejected",
                context={
                    "bindings": sorted(self._entries),
                    "errors": len(errors),
                },
            )
            raise CompositionError(errors)
        logger.debug("composition built", context={"bindings": sorted(handles)})
        return MappingProxyType(handles)


__all__ = ["Composition"]
