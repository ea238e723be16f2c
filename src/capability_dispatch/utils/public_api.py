"""Utility helpers for building lazy-loading public package APIs."""

from __future__ import annotations

from importlib import import_module
from typing import Any, Iterable, Mapping, MutableMapping, overload

from capability_dispatch.logging import get_logger

logger = get_logger("utils.public_api")


class MissingExportError(AttributeError):
    """Raised when a requested export is not defined in the public API."""

    def __init__(self, module_name: str, attribute: str) -> None:
        super().__init__(f"module {module_name!r} has no attribute {attribute!r}")


ModuleTarget = tuple[str, str]
ModuleMap = Mapping[str, str | ModuleTarget]


@overload
def _normalize_target(name: str, target: str) -> ModuleTarget: ...


@overload
def _normalize_target(name: str, target: ModuleTarget) -> ModuleTarget: ...


def _normalize_target(name: str, target: str | ModuleTarget) -> ModuleTarget:
    if isinstance(target, tuple):
        return target
    return target, name


def resolve_export(
    name: str,
    *,
    module_all: Iterable[str],
    module_map: ModuleMap,
    module_globals: MutableMapping[str, Any],
) -> Any:
    """
    Resolve a lazily-loaded export for a package ``__init__`` module.

    The resolved value is cached in ``module_globals`` so later lookups bypass
    ``__getattr__``.

    Raises:
        MissingExportError: If ``name`` is not part of ``module_all``.
    """
    if name not in module_all:
        logger.warning(
            "missing public api export",
            context={"module": module_globals["__name__"], "export": name},
        )
        raise MissingExportError(module_globals["__name__"], name)
    module_path, attr_name = _normalize_target(name, module_map[name])
    module = import_module(module_path)
    value = getattr(module, attr_name)
    module_globals[name] = value
    logger.debug(
        "resolved public api export",
        context={"module": module_globals["__name__"], "export": name},
    )
    return value


def build_module_dir(
    *,
    module_all: Iterable[str],
    module_globals: MutableMapping[str, Any],
) -> list[str]:
    """Return a sorted directory listing for a package __init__ module."""
    return sorted(set(module_globals.keys()) | set(module_all))
