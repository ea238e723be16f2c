"""Draw any collection of drawable shapes."""

from __future__ import annotations

from typing import Any, Iterable

from capability_dispatch.capabilities.builtin import Drawable
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher


def draw_all(
    shapes: Iterable[Any], *, dispatcher: CapabilityDispatcher | None = None
) -> list[str]:
    active = dispatcher or CapabilityDispatcher()
    handles = [active.bind(shape, Drawable) for shape in shapes]
    return [handle.draw() for handle in handles]
