from __future__ import annotations

import logging
from typing import Optional, Sequence

import pytest

from todomvc.application.todo.session import TodoSession
from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.entities.filter import Filter
from todomvc.domain.todo.exceptions.todo_exceptions import IndexOutOfRangeError, PersistenceError
from todomvc.infrastructure.data.repositories import InMemoryEntryRepository


class FailingRepository:
    def __init__(self, entries: Optional[list[Entry]] = None, fail_load: bool = False) -> None:
        self.entries = entries
        self.fail_load = fail_load
        self.fail_save = True
        self.save_attempts = 0

    def load(self) -> Optional[list[Entry]]:
        if self.fail_load:
            raise PersistenceError("disk unavailable")
        return self.entries

    def save(self, entries: Sequence[Entry]) -> None:
        self.save_attempts += 1
        if self.fail_save:
            raise PersistenceError("disk full")
        self.entries = list(entries)


def test_open_seeds_state_from_repository(sample_entries: list[Entry]) -> None:
    session = TodoSession.open(InMemoryEntryRepository(sample_entries))

    assert session.state.entries == sample_entries
    assert session.state.filter is Filter.ALL


def test_open_with_nothing_stored_starts_empty(todo_session: TodoSession) -> None:
    assert todo_session.state.entries == []


def test_open_degrades_to_empty_list_on_load_failure(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        session = TodoSession.open(FailingRepository(fail_load=True))

    assert session.state.entries == []
    assert "Could not load todo entries" in caplog.text


def test_entry_changes_are_saved(todo_session: TodoSession, in_memory_entry_repo: InMemoryEntryRepository) -> None:
    todo_session.update_draft("Buy milk")
    assert todo_session.add_entry() is True
    todo_session.update_draft("Walk dog")
    todo_session.add_entry()
    todo_session.toggle(0)
    todo_session.remove(1)

    assert in_memory_entry_repo.load() == [Entry("Buy milk", completed=True)]
    assert in_memory_entry_repo.save_count == 4


def test_filter_drafts_and_editing_are_not_saved(
    todo_session: TodoSession, in_memory_entry_repo: InMemoryEntryRepository
) -> None:
    todo_session.update_draft("x")
    todo_session.add_entry()
    saves = in_memory_entry_repo.save_count

    todo_session.set_filter(Filter.ACTIVE)
    todo_session.update_draft("typing")
    todo_session.toggle_edit_mode(0)
    todo_session.update_edit_draft("typing more")
    todo_session.cancel_edit(0)

    assert in_memory_entry_repo.save_count == saves


def test_noop_mutations_skip_the_save(todo_session: TodoSession, in_memory_entry_repo: InMemoryEntryRepository) -> None:
    todo_session.update_draft("   ")

    assert todo_session.add_entry() is True
    assert todo_session.clear_completed() is True
    assert todo_session.toggle_all(True) is True
    assert in_memory_entry_repo.save_count == 0


def test_commit_edit_is_saved(in_memory_entry_repo: InMemoryEntryRepository) -> None:
    in_memory_entry_repo.save([Entry("A")])
    session = TodoSession.open(in_memory_entry_repo)

    session.toggle_edit_mode(0)
    session.update_edit_draft("A2")
    session.commit_edit(0)

    assert in_memory_entry_repo.load() == [Entry("A2")]


def test_save_failure_keeps_memory_state(caplog: pytest.LogCaptureFixture) -> None:
    repo = FailingRepository([Entry("A")])
    session = TodoSession.open(repo)

    with caplog.at_level(logging.ERROR):
        assert session.toggle(0) is False

    assert session.state.entries == [Entry("A", completed=True)]
    assert isinstance(session.last_save_error, PersistenceError)
    assert "toggle failed" in caplog.text

    repo.fail_save = False
    assert session.clear_completed() is True
    assert session.last_save_error is None
    assert repo.entries == []


def test_index_errors_propagate_without_saving() -> None:
    repo = FailingRepository([Entry("A")])
    session = TodoSession.open(repo)
    session.set_filter(Filter.COMPLETED)

    with pytest.raises(IndexOutOfRangeError):
        session.remove(0)

    assert repo.save_attempts == 0
    assert session.state.entries == [Entry("A")]
