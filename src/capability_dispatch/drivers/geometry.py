"""Resize a rectangle and measure it."""

from __future__ import annotations

from typing import Any

from capability_dispatch.capabilities.builtin import HasIndependentDimensions
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher


def resize_and_measure(
    rect: Any,
    width: int,
    height: int,
    *,
    dispatcher: CapabilityDispatcher | None = None,
) -> int:
    """Set width, then height, and return the resulting area (always ``width * height``)."""
    active = dispatcher or CapabilityDispatcher()
    handle = active.bind(rect, HasIndependentDimensions)
    handle.set_width(width)
    handle.set_height(height)
    return handle.area()
