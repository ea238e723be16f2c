"""Registry for tracking declared capabilities and the variants conforming to them."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from .base import Capability


class CapabilityRegistry:
    """In-memory registry of capability contracts and variant conformance declarations."""

    def __init__(self) -> None:
        self._capabilities: dict[str, Capability] = {}
        self._conformances: dict[type, set[str]] = {}

    def register_capability(
        self, capability: Capability, *, replace: bool = False
    ) -> Capability:
        """
        Record a capability contract under its name.

        Re-registering an identical contract is a no-op.

        Raises:
            ValueError: If a different contract already uses the name and ``replace`` is False.
        """
        existing = self._capabilities.get(capability.name)
        if existing is not None and existing != capability and not replace:
            raise ValueError(
                f"Capability '{capability.name}' is already registered with "
                f"operations {list(existing.operation_names)}"
            )
        if existing is None or replace:
            self._capabilities[capability.name] = capability
        return self._capabilities[capability.name]

    def get_capability(self, name: str) -> Capability:
        """Return the contract registered under ``name``; raise KeyError when absent."""
        try:
            return self._capabilities[name]
        except KeyError:
            raise KeyError(f"Unknown capability '{name}'") from None

    def capabilities(self) -> tuple[Capability, ...]:
        return tuple(self._capabilities.values())

    def register(
        self,
        variant_cls: type,
        capabilities: Iterable[str],
        *,
        replace: bool = False,
    ) -> None:
        """
        Record capability names a variant class declares conformance to.

        Parameters:
            variant_cls: Class receiving the declaration.
            capabilities: Iterable of capability names.
            replace: Overwrite existing entries instead of merging.
        """
        if replace or variant_cls not in self._conformances:
            self._conformances[variant_cls] = set(capabilities)
        else:
            self._conformances[variant_cls].update(capabilities)

    def get(self, variant_cls: type) -> frozenset[str]:
        """Return declared capability names, including those inherited from base classes."""
        names: set[str] = set()
        for klass in variant_cls.__mro__:
            names.update(self._conformances.get(klass, set()))
        return frozenset(names)

    def conforming(self, name: str) -> tuple[type, ...]:
        """Return variant classes that declared the capability directly."""
        return tuple(
            variant_cls
            for variant_cls, names in self._conformances.items()
            if name in names
        )

    def snapshot(self) -> Mapping[type, frozenset[str]]:
        """Expose a read-only copy of the conformance declarations."""
        return MappingProxyType(
            {variant: frozenset(names) for variant, names in self._conformances.items()}
        )


default_registry = CapabilityRegistry()
