"""Drivers written purely against capabilities."""

from __future__ import annotations

from typing import Any

from capability_dispatch.utils.public_api import build_module_dir, resolve_export

__all__ = [
    "Book",
    "BookRecord",
    "Button",
    "Purchase",
    "SettingsManager",
    "copy",
    "draw_all",
    "fly_all",
    "resize_and_measure",
]

_MODULE_MAP = {
    "Book": "capability_dispatch.drivers.book",
    "BookRecord": "capability_dispatch.drivers.book",
    "Button": "capability_dispatch.drivers.button",
    "Purchase": "capability_dispatch.drivers.purchase",
    "SettingsManager": "capability_dispatch.drivers.settings",
    "copy": "capability_dispatch.drivers.copier",
    "draw_all": "capability_dispatch.drivers.shapes",
    "fly_all": "capability_dispatch.drivers.flight",
    "resize_and_measure": "capability_dispatch.drivers.geometry",
}


def __getattr__(name: str) -> Any:
    return resolve_export(
        name,
        module_all=__all__,
        module_map=_MODULE_MAP,
        module_globals=globals(),
    )


def __dir__() -> list[str]:
    return build_module_dir(module_all=__all__, module_globals=globals())
