from __future__ import annotations

from dataclasses import dataclass

from todomvc.domain.todo.entities.filter import Filter


@dataclass(frozen=True)
class EntryView:
    visible_index: int
    absolute_index: int
    description: str
    completed: bool
    editing: bool


@dataclass(frozen=True)
class TodoListView:
    entries: tuple[EntryView, ...]
    filter: Filter
    filters: tuple[Filter, ...]
    total: int
    total_completed: int
    total_active: int
    all_completed: bool
    draft_value: str
    draft_edit_value: str

    @property
    def is_empty(self) -> bool:
        return self.total_active + self.total_completed == 0
