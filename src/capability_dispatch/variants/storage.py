"""Storage backends the book example persists through."""

from __future__ import annotations

from typing import Any

from capability_dispatch.capabilities.builtin import Storage
from capability_dispatch.capabilities.conformance import implements
from capability_dispatch.capabilities.result import OperationResult
from capability_dispatch.logging import get_logger

logger = get_logger("variants.storage")


class _RecordingStorage:
    backend = "memory"

    def __init__(self) -> None:
        self.saved: list[Any] = []

    def save(self, record: Any) -> OperationResult[Any]:
        self.saved.append(record)
        logger.debug("record saved", context={"backend": self.backend})
        return OperationResult.success(record)


@implements(Storage)
class MemoryStorage(_RecordingStorage):
    backend = "memory"


@implements(Storage)
class CoreDataStorage(_RecordingStorage):
    backend = "core_data"


@implements(Storage)
class ParseStorage(_RecordingStorage):
    backend = "parse"


@implements(Storage)
class ArchiveStorage:
    """Frozen archive: accepts the call but reports saving as unsupported."""

    backend = "archive"

    def save(self, record: Any) -> OperationResult[Any]:
        return OperationResult.unsupported("archive storage is read-only")


__all__ = ["ArchiveStorage", "CoreDataStorage", "MemoryStorage", "ParseStorage"]
