"""Ducks composed from capabilities instead of inheriting a flight method."""

from __future__ import annotations

from capability_dispatch.capabilities.builtin import Flyable
from capability_dispatch.capabilities.conformance import implements


class Duck:
    """Base duck; says nothing about flight."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__


@implements(Flyable)
class Mallard(Duck):
    def fly(self) -> str:
        return f"{self.name} flaps away"


@implements(Flyable)
class CanadaGoose(Duck):
    """Declares flight but relies on the capability default."""


class Decoy(Duck):
    """Wooden decoy; does not fly and does not claim to."""


class RubberDuck(Duck):
    pass


__all__ = ["CanadaGoose", "Decoy", "Duck", "Mallard", "RubberDuck"]
