"""Switchable targets for the button example, including an adapted motor."""

from __future__ import annotations

import random

from capability_dispatch.capabilities.builtin import Readable, Switchable
from capability_dispatch.capabilities.conformance import implements


@implements(Switchable)
class Lamp:
    def __init__(self) -> None:
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True

    def turn_off(self) -> None:
        self.is_on = False


class Motor:
    """Third-party motor whose interface cannot be changed."""

    def __init__(self) -> None:
        self.running = False
        self.starts = 0

    def motor_on(self) -> None:
        self.running = True
        self.starts += 1

    def motor_off(self) -> None:
        self.running = False


@implements(Switchable)
class MotorAdapter:
    """Expose a :class:`Motor` as a switchable target without modifying it."""

    def __init__(self, motor: Motor) -> None:
        self._motor = motor

    @property
    def motor(self) -> Motor:
        return self._motor

    def turn_on(self) -> None:
        self._motor.motor_on()

    def turn_off(self) -> None:
        self._motor.motor_off()


@implements(Readable)
class GestureDetector:
    """Reports whether an on gesture was detected, driven by a seeded random source."""

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
        probability: float = 0.5,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be between 0 and 1")
        self._rng = rng or random.Random(seed)
        self._probability = probability

    def read(self) -> bool:
        return self._rng.random() < self._probability


__all__ = ["GestureDetector", "Lamp", "Motor", "MotorAdapter"]
