"""Settings resources that can be loaded and, for some of them, persisted."""

from __future__ import annotations

from typing import Any, Mapping

from capability_dispatch.capabilities.builtin import Loadable, Persistable
from capability_dispatch.capabilities.conformance import implements
from capability_dispatch.capabilities.result import OperationResult


class _SettingsResource:
    label = "settings"

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._source = dict(values or {})
        self.values: dict[str, Any] = {}
        self.loaded = False

    def load(self) -> OperationResult[dict[str, Any]]:
        self.values = dict(self._source)
        self.loaded = True
        return OperationResult.success(dict(self.values))


class _PersistentSettingsResource(_SettingsResource):
    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        super().__init__(values)
        self.persisted: dict[str, Any] | None = None

    def persist(self) -> OperationResult[dict[str, Any]]:
        if not self.loaded:
            return OperationResult.failure(f"{self.label} must be loaded before persisting")
        self.persisted = dict(self.values)
        return OperationResult.success(dict(self.persisted))


@implements(Loadable, Persistable)
class ApplicationSettings(_PersistentSettingsResource):
    label = "app settings"


@implements(Loadable, Persistable)
class UserSettings(_PersistentSettingsResource):
    label = "user settings"


@implements(Loadable)
class SpecialSettings(_SettingsResource):
    """Read-only settings: loadable, never persistable."""

    label = "special settings"


__all__ = ["ApplicationSettings", "SpecialSettings", "UserSettings"]
