from __future__ import annotations

from collections.abc import Iterable

from todomvc.application.contracts.todo_dtos import EntryView, TodoListView


def entry_classes(entry: EntryView) -> str:
    classes = ["todo"]
    if entry.editing:
        classes.append("editing")
    if entry.completed:
        classes.append("completed")
    return " ".join(classes)


def items_left_text(count: int) -> str:
    return f"{count} item left" if count == 1 else f"{count} items left"


def entry_to_viewmodel(entry: EntryView) -> dict[str, int | str | bool]:
    return {
        "index": entry.visible_index,
        "description": entry.description,
        "completed": entry.completed,
        "editing": entry.editing,
        "classes": entry_classes(entry),
    }


def entries_to_viewmodels(entries: Iterable[EntryView]) -> list[dict[str, int | str | bool]]:
    return [entry_to_viewmodel(entry) for entry in entries]


def todo_list_to_viewmodel(view: TodoListView) -> dict:
    return {
        "entries": entries_to_viewmodels(view.entries),
        "show_main": not view.is_empty,
        "all_completed": view.all_completed,
        "items_left": items_left_text(view.total_active),
        "clear_completed_label": f"Clear completed ({view.total_completed})",
        "show_clear_completed": view.total_completed > 0,
        "filters": [
            {
                "label": item.label,
                "href": item.fragment,
                "selected": item is view.filter,
            }
            for item in view.filters
        ],
        "draft_value": view.draft_value,
        "draft_edit_value": view.draft_edit_value,
    }
