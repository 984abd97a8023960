from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from todomvc.domain.repositories.entry_repository import EntryRepository
from todomvc.domain.todo.entities.entry import Entry
from todomvc.infrastructure.data.serialization import (
    entries_from_payload,
    entries_to_payload,
)


class InMemoryEntryRepository(EntryRepository):
    """Simple in-memory repository holding the serialized entry list."""

    def __init__(self, initial_items: Optional[Iterable[Entry]] = None) -> None:
        self._payload: Optional[list[dict[str, Any]]] = None
        self.save_count = 0
        if initial_items is not None:
            self._payload = entries_to_payload(list(initial_items))

    def load(self) -> Optional[list[Entry]]:
        if self._payload is None:
            return None
        return entries_from_payload(self._payload)

    def save(self, entries: Sequence[Entry]) -> None:
        self._payload = entries_to_payload(entries)
        self.save_count += 1
