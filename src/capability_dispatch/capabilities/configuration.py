"""Declarative helpers for grouping capabilities into bundles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, TypeAlias

from .base import Capability, CapabilityLike, capability_of


@dataclass(frozen=True, slots=True)
class CapabilitySet:
    """Named bundle of capabilities a combined variant is bound to at once."""

    label: str
    capabilities: tuple[Capability, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "capabilities",
            tuple(capability_of(entry) for entry in self.capabilities),
        )

    @classmethod
    def of(cls, label: str, *capabilities: CapabilityLike) -> "CapabilitySet":
        return cls(label, tuple(capability_of(entry) for entry in capabilities))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.capabilities)


CapabilityEntry: TypeAlias = "CapabilitySet | CapabilityLike"


def iter_capabilities(
    entries: Sequence[CapabilityEntry] | Iterable[CapabilityEntry],
) -> Iterator[Capability]:
    """Yield capabilities, expanding bundles on the fly."""
    for entry in entries:
        if isinstance(entry, CapabilitySet):
            yield from entry.capabilities
        else:
            yield capability_of(entry)


def flatten_capabilities(
    entries: Sequence[CapabilityEntry] | Iterable[CapabilityEntry],
) -> tuple[Capability, ...]:
    """Return a tuple of concrete capabilities, expanding bundles and dropping repeats."""
    flattened: dict[str, Capability] = {}
    for entry in iter_capabilities(entries):
        flattened.setdefault(entry.name, entry)
    return tuple(flattened.values())


__all__ = [
    "CapabilityEntry",
    "CapabilitySet",
    "flatten_capabilities",
    "iter_capabilities",
]
