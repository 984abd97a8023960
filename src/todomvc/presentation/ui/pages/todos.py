from __future__ import annotations

import logging
from typing import Callable

from nicegui import ui

from todomvc.application.todo.session import TodoSession
from todomvc.domain.todo.exceptions.todo_exceptions import IndexOutOfRangeError
from todomvc.presentation.controllers import todo_controller
from todomvc.presentation.ui.styles import (
    C_BTN_GHOST,
    C_CARD,
    C_FILTER_LINK,
    C_FILTER_LINK_SELECTED,
    C_INPUT,
    C_LABEL,
    C_LABEL_COMPLETED,
    C_PAGE_TITLE,
    C_ROW,
    C_TEXT_SUBTLE,
)
from todomvc.presentation.ui.viewmodels.todo_viewmodel import todo_list_to_viewmodel

logger = logging.getLogger(__name__)

ROUTE_EVENT = "todomvc_route"
_ROUTE_LISTENER_JS = f"""
<script>
  window.addEventListener('hashchange', () => emitEvent('{ROUTE_EVENT}', window.location.hash));
</script>
"""
_EMIT_ROUTE_JS = f"emitEvent('{ROUTE_EVENT}', window.location.hash)"


def run_row_action(
    action: Callable[[], bool | None],
    on_done: Callable[[bool], None],
    on_stale: Callable[[IndexOutOfRangeError], None],
) -> None:
    """Run a row handler and report whether its change was saved.

    A row index that no longer resolves goes to ``on_stale`` instead; the
    session is left untouched in that case.
    """
    try:
        saved = action()
    except IndexOutOfRangeError as exc:
        logger.error("Stale row index from the todo view: %s", exc)
        on_stale(exc)
        return
    on_done(saved is not False)


def render_todos(session: TodoSession) -> None:
    ui.label("todos").classes(C_PAGE_TITLE)

    def after_mutation(saved: bool) -> None:
        if not saved:
            ui.notify("Changes could not be saved. They are kept until you close this page.", color="red")
        todo_list.refresh()

    def after_stale_index(_exc: IndexOutOfRangeError) -> None:
        ui.notify("The list changed, please try again.", color="orange")
        todo_list.refresh()

    def guarded(action: Callable[[], bool | None]) -> None:
        run_row_action(action, after_mutation, after_stale_index)

    def handle_add() -> None:
        text = new_input.value or ""
        if not text.strip():
            return
        saved = todo_controller.add_entry(session, text)
        new_input.value = ""
        after_mutation(saved)

    def handle_commit(index: int, text: str) -> None:
        guarded(lambda: todo_controller.commit_edit_if_editing(session, index, text))

    def handle_route(fragment: str | None) -> None:
        selected = todo_controller.select_route(session, fragment)
        logger.debug("Route %r selected filter %s", fragment, selected.label)
        todo_list.refresh()

    def render_entry(item: dict, draft_edit_value: str) -> None:
        index = item["index"]
        with ui.row().classes(f"{item['classes']} {C_ROW}"):
            if item["editing"]:
                edit_input = ui.input(value=draft_edit_value).classes(C_INPUT).props("autofocus")
                edit_input.on("keydown.enter", lambda: handle_commit(index, edit_input.value or ""))
                edit_input.on("blur", lambda: handle_commit(index, edit_input.value or ""))
                edit_input.on(
                    "keydown.escape",
                    lambda: guarded(lambda: todo_controller.cancel_edit(session, index)),
                )
                return
            with ui.row().classes("items-center gap-2"):
                ui.checkbox(
                    value=item["completed"],
                    on_change=lambda: guarded(lambda: todo_controller.toggle(session, index)),
                )
                label = ui.label(item["description"]).classes(
                    C_LABEL_COMPLETED if item["completed"] else C_LABEL
                )
                label.on("dblclick", lambda: guarded(lambda: todo_controller.start_edit(session, index)))
            ui.button(
                icon="close",
                on_click=lambda: guarded(lambda: todo_controller.remove(session, index)),
                color=None,
            ).props("flat dense").classes(C_BTN_GHOST)

    @ui.refreshable
    def todo_list() -> None:
        model = todo_list_to_viewmodel(todo_controller.todo_view(session))
        if not model["show_main"]:
            ui.label("Nothing to do yet.").classes(C_TEXT_SUBTLE)
            return

        ui.checkbox(
            "Mark all as complete",
            value=model["all_completed"],
            on_change=lambda e: guarded(lambda: todo_controller.toggle_all(session, bool(e.value))),
        ).classes(C_TEXT_SUBTLE)

        with ui.column().classes("w-full gap-0"):
            for item in model["entries"]:
                render_entry(item, model["draft_edit_value"])

        with ui.row().classes("w-full items-center justify-between mt-2"):
            ui.label(model["items_left"]).classes(C_TEXT_SUBTLE)
            with ui.row().classes("gap-1"):
                for option in model["filters"]:
                    ui.link(option["label"], option["href"]).classes(
                        C_FILTER_LINK_SELECTED if option["selected"] else C_FILTER_LINK
                    )
            if model["show_clear_completed"]:
                ui.button(
                    model["clear_completed_label"],
                    on_click=lambda: guarded(lambda: todo_controller.clear_completed(session)),
                    color=None,
                ).props("flat").classes(C_BTN_GHOST)

    with ui.card().classes(f"{C_CARD} p-4 w-full gap-3"):
        new_input = ui.input(
            placeholder="What needs to be done?",
            value=session.state.draft_value,
            on_change=lambda e: session.update_draft(e.value or ""),
        ).classes(C_INPUT).props("autofocus")
        new_input.on("keydown.enter", handle_add)

        ui.separator().classes("my-1")
        todo_list()

    ui.on(ROUTE_EVENT, lambda e: handle_route(e.args))
    ui.add_body_html(_ROUTE_LISTENER_JS)
    client = ui.context.client
    client.on_connect(lambda: client.run_javascript(_EMIT_ROUTE_JS))
