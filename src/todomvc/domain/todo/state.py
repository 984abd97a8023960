from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.entities.filter import Filter
from todomvc.domain.todo.exceptions.todo_exceptions import IndexOutOfRangeError


def visible_indices(entries: Sequence[Entry], filter: Filter) -> list[int]:
    return [index for index, entry in enumerate(entries) if filter.matches(entry)]


def resolve_visible_index(entries: Sequence[Entry], filter: Filter, visible_idx: int) -> int:
    """Translate a row position in the filtered view into a storage index.

    The mapping is rebuilt on every call because entries and filter may have
    changed since the view was rendered.
    """
    indices = visible_indices(entries, filter)
    if visible_idx < 0 or visible_idx >= len(indices):
        raise IndexOutOfRangeError(visible_idx, len(indices))
    return indices[visible_idx]


class VisibleEntries:
    """Restartable view over ``(absolute_index, entry)`` pairs matching a filter."""

    def __init__(self, state: TodoListState) -> None:
        self._state = state

    def __iter__(self) -> Iterator[tuple[int, Entry]]:
        current_filter = self._state.filter
        for index, entry in enumerate(self._state.entries):
            if current_filter.matches(entry):
                yield index, entry


class TodoListState:
    """Ordered todo entries plus the active filter and the two text drafts.

    The state performs no I/O. Mutations that change ``entries`` return
    ``True`` so the caller can persist the new list.
    """

    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        filter: Filter = Filter.ALL,
    ) -> None:
        self.entries: list[Entry] = list(entries or [])
        self.filter = filter
        self.draft_value = ""
        self.draft_edit_value = ""

    def visible_entries(self) -> VisibleEntries:
        return VisibleEntries(self)

    def total(self) -> int:
        return sum(1 for _ in self.visible_entries())

    def total_completed(self) -> int:
        return sum(1 for entry in self.entries if entry.completed)

    def total_active(self) -> int:
        return len(self.entries) - self.total_completed()

    def is_all_completed(self) -> bool:
        visible = [entry for _, entry in self.visible_entries()]
        return bool(visible) and all(entry.completed for entry in visible)

    def resolve(self, visible_idx: int) -> int:
        return resolve_visible_index(self.entries, self.filter, visible_idx)

    def update_draft(self, text: str) -> None:
        self.draft_value = text

    def update_edit_draft(self, text: str) -> None:
        self.draft_edit_value = text

    def add_entry(self) -> bool:
        if not self.draft_value.strip():
            return False
        self.entries.append(Entry(description=self.draft_value))
        self.draft_value = ""
        return True

    def toggle_edit_mode(self, visible_idx: int) -> bool:
        index = self.resolve(visible_idx)
        entry = self.entries[index]
        editing = not entry.editing
        self.entries[index] = entry.with_editing(editing)
        if editing:
            self.draft_edit_value = entry.description
        return True

    def commit_edit(self, visible_idx: int) -> bool:
        index = self.resolve(visible_idx)
        entry = self.entries[index]
        self.entries[index] = Entry(
            description=self.draft_edit_value,
            completed=entry.completed,
            editing=False,
        )
        self.draft_edit_value = ""
        return True

    def cancel_edit(self, visible_idx: int) -> bool:
        index = self.resolve(visible_idx)
        self.entries[index] = self.entries[index].with_editing(False)
        self.draft_edit_value = ""
        return True

    def toggle(self, visible_idx: int) -> bool:
        index = self.resolve(visible_idx)
        self.entries[index] = self.entries[index].toggled()
        return True

    def toggle_all(self, target_value: bool) -> bool:
        changed = False
        for index, entry in list(self.visible_entries()):
            if entry.completed != target_value:
                self.entries[index] = entry.with_completed(target_value)
                changed = True
        return changed

    def remove(self, visible_idx: int) -> bool:
        index = self.resolve(visible_idx)
        del self.entries[index]
        return True

    def clear_completed(self) -> bool:
        remaining = [entry for entry in self.entries if not entry.completed]
        changed = len(remaining) != len(self.entries)
        self.entries[:] = remaining
        return changed

    def set_filter(self, new_filter: Filter) -> None:
        self.filter = new_filter
