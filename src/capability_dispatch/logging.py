"""Structured logging helpers shared across the package."""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

__all__ = ["CapabilityLoggerAdapter", "get_logger", "LOGGER_NAMESPACE"]

LOGGER_NAMESPACE = "capability_dispatch"


def _validate_context(context: Any) -> None:
    if context is not None and not isinstance(context, Mapping):
        raise TypeError("context must be a mapping")


class CapabilityLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter attaching a component name and a structured context to each record.

    Callers pass ``context={...}`` alongside the message; the mapping is merged
    with any ``extra["context"]`` supplied by the caller and exposed on the
    record as ``record.context``.
    """

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        # runs ahead of the level gate
        _validate_context(kwargs.get("context"))
        super().log(level, msg, *args, **kwargs)

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        context = kwargs.pop("context", None)
        _validate_context(context)
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        merged: dict[str, Any] = {}
        existing = extra.get("context")
        if isinstance(existing, Mapping):
            merged.update(existing)
        if context:
            merged.update(context)
        if merged:
            extra["context"] = merged
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(component: str) -> CapabilityLoggerAdapter:
    """
    Return a logger adapter for a package component.

    Parameters:
        component (str): Dotted component name, e.g. ``"dispatch.handle"``.

    Returns:
        CapabilityLoggerAdapter: Adapter bound to ``capability_dispatch.<component>``.
    """
    logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{component}")
    return CapabilityLoggerAdapter(logger, {"component": component})
