from __future__ import annotations

import logging
from typing import Optional

from todomvc.domain.repositories.entry_repository import EntryRepository
from todomvc.domain.todo.entities.filter import Filter
from todomvc.domain.todo.exceptions.todo_exceptions import PersistenceError
from todomvc.domain.todo.state import TodoListState

logger = logging.getLogger(__name__)


class TodoSession:
    """Pairs a ``TodoListState`` with the repository it is persisted to.

    Every mutation that changes the stored shape of the list is followed by a
    save of the whole list. A failed save keeps the in-memory state; the
    mutation method returns ``False`` and ``last_save_error`` holds the cause.
    ``IndexOutOfRangeError`` from the state propagates unchanged.
    """

    def __init__(self, repository: EntryRepository, state: Optional[TodoListState] = None) -> None:
        self.repository = repository
        self.state = state if state is not None else TodoListState()
        self.last_save_error: Optional[PersistenceError] = None

    @classmethod
    def open(cls, repository: EntryRepository) -> "TodoSession":
        try:
            entries = repository.load()
        except PersistenceError as exc:
            logger.warning("Could not load todo entries, starting with an empty list: %s", exc)
            entries = None
        state = TodoListState(entries or [])
        logger.info("Opened todo session with %d entries", len(state.entries))
        return cls(repository, state)

    def _persist(self, changed: bool, action: str) -> bool:
        if not changed:
            logger.debug("%s left the entries unchanged", action)
            return True
        try:
            self.repository.save(self.state.entries)
        except PersistenceError as exc:
            self.last_save_error = exc
            logger.error("Saving todo entries after %s failed: %s", action, exc)
            return False
        self.last_save_error = None
        logger.debug("%s saved %d entries", action, len(self.state.entries))
        return True

    def update_draft(self, text: str) -> None:
        self.state.update_draft(text)

    def update_edit_draft(self, text: str) -> None:
        self.state.update_edit_draft(text)

    def set_filter(self, new_filter: Filter) -> None:
        logger.debug("Filter set to %s", new_filter.label)
        self.state.set_filter(new_filter)

    def add_entry(self) -> bool:
        return self._persist(self.state.add_entry(), "add_entry")

    def toggle_edit_mode(self, visible_idx: int) -> None:
        self.state.toggle_edit_mode(visible_idx)

    def cancel_edit(self, visible_idx: int) -> None:
        self.state.cancel_edit(visible_idx)

    def commit_edit(self, visible_idx: int) -> bool:
        return self._persist(self.state.commit_edit(visible_idx), "commit_edit")

    def toggle(self, visible_idx: int) -> bool:
        return self._persist(self.state.toggle(visible_idx), "toggle")

    def toggle_all(self, target_value: bool) -> bool:
        return self._persist(self.state.toggle_all(target_value), "toggle_all")

    def remove(self, visible_idx: int) -> bool:
        return self._persist(self.state.remove(visible_idx), "remove")

    def clear_completed(self) -> bool:
        return self._persist(self.state.clear_completed(), "clear_completed")
