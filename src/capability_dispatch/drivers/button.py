"""Button policy relaying on/off gestures to any switchable target."""

from __future__ import annotations

from typing import Any

from capability_dispatch.capabilities.builtin import Readable, Switchable
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher


class Button:
    """
    Poll a gesture detector and relay the result to a switchable server.

    The detector is any ``Readable`` producing booleans, so tests can feed a
    fixed gesture sequence instead of a random one.
    """

    def __init__(
        self,
        server: Any,
        detector: Any,
        *,
        dispatcher: CapabilityDispatcher | None = None,
    ) -> None:
        active = dispatcher or CapabilityDispatcher()
        self._server = active.bind(server, Switchable)
        self._detector = active.bind(detector, Readable)

    def poll(self) -> bool:
        pressed = bool(self._detector.read())
        if pressed:
            self._server.turn_on()
        else:
            self._server.turn_off()
        return pressed
