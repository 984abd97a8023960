from __future__ import annotations

from todomvc.application.contracts.todo_dtos import EntryView, TodoListView
from todomvc.application.todo.session import TodoSession
from todomvc.domain.todo.entities.filter import Filter


class TodoViewQuery:
    def execute(self, session: TodoSession) -> TodoListView:
        state = session.state
        entries = tuple(
            EntryView(
                visible_index=visible_index,
                absolute_index=absolute_index,
                description=entry.description,
                completed=entry.completed,
                editing=entry.editing,
            )
            for visible_index, (absolute_index, entry) in enumerate(state.visible_entries())
        )
        return TodoListView(
            entries=entries,
            filter=state.filter,
            filters=tuple(Filter.ordered()),
            total=len(entries),
            total_completed=state.total_completed(),
            total_active=state.total_active(),
            all_completed=state.is_all_completed(),
            draft_value=state.draft_value,
            draft_edit_value=state.draft_edit_value,
        )
