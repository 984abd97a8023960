from __future__ import annotations

from nicegui import ui

from todomvc.presentation.ui.styles import C_BG, C_CONTAINER

from .todos import render_todos


def register_pages(container) -> None:
    @ui.page("/", title="todos")
    def index_page() -> None:
        session = container.open_session()
        ui.query("body").classes(C_BG)
        with ui.column().classes(C_CONTAINER):
            render_todos(session)


__all__ = ["register_pages", "render_todos"]
