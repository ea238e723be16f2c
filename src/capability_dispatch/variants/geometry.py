"""Rectangles and squares as separate capabilities."""

from __future__ import annotations

from capability_dispatch.capabilities.builtin import HasIndependentDimensions, HasSide
from capability_dispatch.capabilities.conformance import implements


def _dimension(value: int, label: str) -> int:
    if value < 0:
        raise ValueError(f"{label} must be non-negative")
    return value


@implements(HasIndependentDimensions)
class Rectangle:
    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = _dimension(width, "width")
        self._height = _dimension(height, "height")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_width(self, width: int) -> None:
        self._width = _dimension(width, "width")

    def set_height(self, height: int) -> None:
        self._height = _dimension(height, "height")

    def area(self) -> int:
        return self._width * self._height


@implements(HasSide)
class SquareTile:
    """Square with a single side; deliberately not a rectangle variant."""

    def __init__(self, side: int = 0) -> None:
        self._side = _dimension(side, "side")

    @property
    def side(self) -> int:
        return self._side

    def set_side(self, side: int) -> None:
        self._side = _dimension(side, "side")

    def area(self) -> int:
        return self._side * self._side


__all__ = ["Rectangle", "SquareTile"]
