from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from todomvc.domain.todo.entities.entry import Entry

STORAGE_KEY = "yew.todomvc.self"


@runtime_checkable
class EntryRepository(Protocol):
    """Persistence provider for the full, ordered entry list.

    ``load`` returns ``None`` when nothing has been stored yet. Both methods
    raise ``PersistenceError`` when the backend fails.
    """

    def load(self) -> Optional[Sequence[Entry]]:
        ...

    def save(self, entries: Sequence[Entry]) -> None:
        ...
