"""Book entity that delegates persistence to an injected storage backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from capability_dispatch.capabilities.builtin import Storage
from capability_dispatch.capabilities.result import OperationResult
from capability_dispatch.dispatch.dispatcher import CapabilityDispatcher


@dataclass(frozen=True, slots=True)
class BookRecord:
    title: str
    author: str
    current_page: int | None


class Book:
    def __init__(
        self,
        title: str,
        author: str,
        storage: Any,
        *,
        dispatcher: CapabilityDispatcher | None = None,
    ) -> None:
        self.title = title
        self.author = author
        self.current_page: int | None = None
        self._dispatcher = dispatcher or CapabilityDispatcher()
        self._storage = self._dispatcher.bind(storage, Storage)

    def to_record(self) -> BookRecord:
        return BookRecord(self.title, self.author, self.current_page)

    def save(self) -> OperationResult[Any]:
        return self._dispatcher.attempt(self._storage, "save", self.to_record())
