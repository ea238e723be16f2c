"""Internal utilities."""

from __future__ import annotations

from capability_dispatch.utils.public_api import (
    MissingExportError,
    build_module_dir,
    resolve_export,
)

__all__ = ["MissingExportError", "build_module_dir", "resolve_export"]
