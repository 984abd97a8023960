from __future__ import annotations

from todomvc.application.contracts.todo_dtos import TodoListView
from todomvc.application.todo.queries.todo_view import TodoViewQuery
from todomvc.application.todo.session import TodoSession
from todomvc.domain.todo.entities.filter import Filter

_QUERY = TodoViewQuery()


def add_entry(session: TodoSession, text: str) -> bool:
    session.update_draft(text)
    return session.add_entry()


def start_edit(session: TodoSession, visible_idx: int) -> None:
    if not is_editing(session, visible_idx):
        session.toggle_edit_mode(visible_idx)


def commit_edit(session: TodoSession, visible_idx: int, text: str) -> bool:
    session.update_edit_draft(text)
    return session.commit_edit(visible_idx)


def cancel_edit(session: TodoSession, visible_idx: int) -> None:
    session.cancel_edit(visible_idx)


def toggle(session: TodoSession, visible_idx: int) -> bool:
    return session.toggle(visible_idx)


def toggle_all(session: TodoSession, target_value: bool) -> bool:
    return session.toggle_all(target_value)


def remove(session: TodoSession, visible_idx: int) -> bool:
    return session.remove(visible_idx)


def clear_completed(session: TodoSession) -> bool:
    return session.clear_completed()


def select_route(session: TodoSession, fragment: str | None) -> Filter:
    selected = Filter.from_fragment(fragment)
    session.set_filter(selected)
    return selected


def list_entries(session: TodoSession) -> list[dict[str, int | str | bool]]:
    return [
        {
            "index": entry.visible_index,
            "description": entry.description,
            "completed": entry.completed,
            "editing": entry.editing,
        }
        for entry in _QUERY.execute(session).entries
    ]


def todo_view(session: TodoSession) -> TodoListView:
    return _QUERY.execute(session)


def is_editing(session: TodoSession, visible_idx: int) -> bool:
    state = session.state
    return state.entries[state.resolve(visible_idx)].editing


def commit_edit_if_editing(session: TodoSession, visible_idx: int, text: str) -> bool:
    """Commit the row's edit unless it already left edit mode.

    Enter commits and re-renders, then the input's blur arrives for a row
    that is no longer editing and must not overwrite its description.
    """
    if not is_editing(session, visible_idx):
        return True
    return commit_edit(session, visible_idx, text)
