"""Built-in capability protocols used by the bundled drivers and variants."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from .base import Capability, capability, capability_of
from .registry import default_registry
from .result import OperationResult

ValueT = TypeVar("ValueT")
ValueT_co = TypeVar("ValueT_co", covariant=True)
ValueT_contra = TypeVar("ValueT_contra", contravariant=True)


@capability("readable")
class Readable(Protocol[ValueT_co]):
    """Source side of a copy: produces one value per call."""

    def read(self) -> ValueT_co: ...


@capability("writable")
class Writable(Protocol[ValueT_contra]):
    """Sink side of a copy: consumes one value per call."""

    def write(self, value: ValueT_contra) -> None: ...


@capability("switchable")
class Switchable(Protocol):
    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...


@capability("chargeable")
class Chargeable(Protocol):
    def charge(self, payer: Any, amount: int) -> OperationResult[Any]: ...


@capability("loadable")
class Loadable(Protocol):
    def load(self) -> OperationResult[Any]: ...


@capability("persistable")
class Persistable(Protocol):
    def persist(self) -> OperationResult[Any]: ...


@capability("drawable")
class Drawable(Protocol):
    def draw(self) -> str: ...


def default_fly(flyer: Any) -> str:
    """Flight used by flyers that do not describe their own."""
    return f"{type(flyer).__name__} flies the default way"


@capability("flyable", defaults={"fly": default_fly})
class Flyable(Protocol):
    def fly(self) -> str: ...


def dimensions_are_independent(rect: Any) -> bool:
    """Setting width then height must produce exactly their product."""
    rect.set_width(5)
    rect.set_height(4)
    return rect.area() == 20


def height_does_not_reset_width(rect: Any) -> bool:
    rect.set_height(7)
    rect.set_width(3)
    return rect.area() == 21


@capability(
    "independent_dimensions",
    contracts=(dimensions_are_independent, height_does_not_reset_width),
)
class HasIndependentDimensions(Protocol):
    """Shapes whose width and height can be changed separately."""

    def set_width(self, width: int) -> None: ...

    def set_height(self, height: int) -> None: ...

    def area(self) -> int: ...


def side_sets_both_dimensions(square: Any) -> bool:
    square.set_side(6)
    return square.area() == 36


@capability("has_side", contracts=(side_sets_both_dimensions,))
class HasSide(Protocol):
    """Shapes with a single edge length."""

    def set_side(self, side: int) -> None: ...

    def area(self) -> int: ...


@capability("storage")
class Storage(Protocol):
    def save(self, record: Any) -> OperationResult[Any]: ...


BUILTIN_CAPABILITIES: tuple[Capability, ...] = tuple(
    capability_of(protocol)
    for protocol in (
        Readable,
        Writable,
        Switchable,
        Chargeable,
        Loadable,
        Persistable,
        Drawable,
        Flyable,
        HasIndependentDimensions,
        HasSide,
        Storage,
    )
)

for _spec in BUILTIN_CAPABILITIES:
    default_registry.register_capability(_spec)


__all__ = [
    "BUILTIN_CAPABILITIES",
    "Chargeable",
    "Drawable",
    "Flyable",
    "HasIndependentDimensions",
    "HasSide",
    "Loadable",
    "Persistable",
    "Readable",
    "Storage",
    "Switchable",
    "Writable",
    "default_fly",
    "dimensions_are_independent",
    "height_does_not_reset_width",
    "side_sets_both_dimensions",
]
