from __future__ import annotations

from todomvc.composition_root import create_app_container
from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.entities.filter import Filter
from todomvc.presentation.controllers import todo_controller
from todomvc.settings import Settings


def test_todo_flow_survives_a_new_session() -> None:
    container = create_app_container(Settings(storage="memory"))
    session = container.open_session()

    for text in ["Einkaufen", "Rechnung senden", "Follow-up"]:
        todo_controller.add_entry(session, text)
    todo_controller.toggle(session, 1)

    reopened = container.open_session()

    assert reopened.state.entries == [
        Entry("Einkaufen"),
        Entry("Rechnung senden", completed=True),
        Entry("Follow-up"),
    ]


def test_todo_flow_via_controller_with_routes() -> None:
    container = create_app_container(Settings(storage="memory"))
    session = container.open_session()
    todo_controller.add_entry(session, "A")
    todo_controller.add_entry(session, "B")
    todo_controller.add_entry(session, "C")
    todo_controller.toggle(session, 0)
    todo_controller.toggle(session, 2)

    assert todo_controller.select_route(session, "#/completed") is Filter.COMPLETED
    assert [item["description"] for item in todo_controller.list_entries(session)] == ["A", "C"]

    todo_controller.remove(session, 1)

    assert todo_controller.select_route(session, "#/") is Filter.ALL
    assert todo_controller.list_entries(session) == [
        {"index": 0, "description": "A", "completed": True, "editing": False},
        {"index": 1, "description": "B", "completed": False, "editing": False},
    ]


def test_edit_flow_via_controller() -> None:
    container = create_app_container(Settings(storage="memory"))
    session = container.open_session()
    todo_controller.add_entry(session, "Onboarding")

    todo_controller.start_edit(session, 0)
    todo_controller.start_edit(session, 0)
    assert todo_controller.is_editing(session, 0) is True
    assert session.state.draft_edit_value == "Onboarding"

    todo_controller.commit_edit(session, 0, "Onboarding abschließen")

    assert todo_controller.is_editing(session, 0) is False
    assert container.open_session().state.entries == [Entry("Onboarding abschließen")]


def test_controller_view_reports_counts() -> None:
    container = create_app_container(Settings(storage="memory"))
    session = container.open_session()
    todo_controller.add_entry(session, "A")
    todo_controller.add_entry(session, "B")
    todo_controller.toggle_all(session, True)
    todo_controller.select_route(session, "#/active")

    view = todo_controller.todo_view(session)

    assert view.entries == ()
    assert view.total == 0
    assert view.total_completed == 2
    assert view.total_active == 0
    assert view.all_completed is False
    assert view.filters == (Filter.ALL, Filter.ACTIVE, Filter.COMPLETED)


def test_json_backend_container(tmp_path) -> None:
    settings = Settings(storage="json", json_path=str(tmp_path / "todos.json"))
    session = create_app_container(settings).open_session()
    todo_controller.add_entry(session, "persisted")

    assert create_app_container(settings).open_session().state.entries == [Entry("persisted")]


def test_sqlite_backend_container(tmp_path) -> None:
    settings = Settings(storage="sqlite", db_url=f"sqlite:///{tmp_path / 'db' / 'todos.db'}")
    session = create_app_container(settings).open_session()
    todo_controller.add_entry(session, "persisted")
    todo_controller.clear_completed(session)

    assert create_app_container(settings).open_session().state.entries == [Entry("persisted")]


def test_ui_entry_points_import() -> None:
    from todomvc import main
    from todomvc.presentation.ui.pages import register_pages, render_todos

    assert callable(main.run)
    assert callable(register_pages) and callable(render_todos)
