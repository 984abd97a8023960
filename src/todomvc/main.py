"""Run the todomvc NiceGUI app."""

from nicegui import ui

from todomvc.composition_root import create_app_container
from todomvc.env import load_env
from todomvc.logging_setup import setup_logging
from todomvc.presentation.ui.pages import register_pages
from todomvc.settings import Settings


def run() -> None:
    load_env()
    settings = Settings.from_env()
    setup_logging(settings)
    container = create_app_container(settings)
    register_pages(container)
    ui.run(
        title="todos",
        host=settings.host,
        port=settings.port,
        storage_secret=settings.storage_secret,
        reload=False,
        favicon="✅",
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
