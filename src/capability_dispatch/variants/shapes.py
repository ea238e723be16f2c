"""Drawable shapes; adding a shape never touches the drawing driver."""

from __future__ import annotations

from dataclasses import dataclass

from capability_dispatch.capabilities.builtin import Drawable
from capability_dispatch.capabilities.conformance import implements


@dataclass(frozen=True, slots=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


ORIGIN = Point()


@implements(Drawable)
@dataclass(frozen=True)
class Circle:
    radius: float
    center: Point = ORIGIN

    def draw(self) -> str:
        return f"circle radius {self.radius:g} at {self.center}"


@implements(Drawable)
@dataclass(frozen=True)
class Square:
    side: float
    corner: Point = ORIGIN

    def draw(self) -> str:
        return f"square side {self.side:g} at {self.corner}"


@implements(Drawable)
@dataclass(frozen=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    def draw(self) -> str:
        return f"triangle {self.a} {self.b} {self.c}"


__all__ = ["Circle", "ORIGIN", "Point", "Square", "Triangle"]
