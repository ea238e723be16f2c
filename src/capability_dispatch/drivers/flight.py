"""Make every flyer fly."""

from __future__ import annotations

from typing import Any, Iterable

from capability_dispatch.capabilities.builtin import Flyable
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher


def fly_all(
    flyers: Iterable[Any], *, dispatcher: CapabilityDispatcher | None = None
) -> list[str]:
    """
    Fly every flyer in order.

    Only flyers are accepted: a duck that cannot fly is rejected when bound,
    before anything takes off, instead of being skipped inside the loop.
    """
    active = dispatcher or CapabilityDispatcher()
    handles = [active.bind(flyer, Flyable) for flyer in flyers]
    return [handle.fly() for handle in handles]
