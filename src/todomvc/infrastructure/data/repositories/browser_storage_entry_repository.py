from __future__ import annotations

from typing import Any, MutableMapping, Optional, Sequence

from nicegui import app

from todomvc.domain.repositories.entry_repository import STORAGE_KEY, EntryRepository
from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.exceptions.todo_exceptions import PersistenceError
from todomvc.infrastructure.data.serialization import (
    entries_from_payload,
    entries_to_payload,
)


class BrowserStorageEntryRepository(EntryRepository):
    """Stores the entry list in NiceGUI's per-browser user storage.

    ``app.storage.user`` is only available inside a page context, so it is
    looked up on every call unless a mapping is passed in.
    """

    def __init__(self, storage: Optional[MutableMapping[str, Any]] = None, key: str = STORAGE_KEY) -> None:
        self._storage = storage
        self.key = key

    def _mapping(self) -> MutableMapping[str, Any]:
        if self._storage is not None:
            return self._storage
        try:
            return app.storage.user
        except RuntimeError as exc:
            raise PersistenceError(f"Browser storage is not available: {exc}") from exc

    def load(self) -> Optional[list[Entry]]:
        payload = self._mapping().get(self.key)
        if payload is None:
            return None
        return entries_from_payload(payload)

    def save(self, entries: Sequence[Entry]) -> None:
        mapping = self._mapping()
        try:
            mapping[self.key] = entries_to_payload(entries)
        except (OSError, TypeError) as exc:
            raise PersistenceError(f"Could not write browser storage: {exc}") from exc
