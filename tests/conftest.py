from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from todomvc.application.todo.session import TodoSession
from todomvc.domain.todo.entities.entry import Entry
from todomvc.infrastructure.data.repositories import InMemoryEntryRepository


@pytest.fixture()
def sample_entries() -> list[Entry]:
    return [
        Entry("A", completed=True),
        Entry("B"),
        Entry("C", completed=True),
        Entry("D"),
    ]


@pytest.fixture()
def in_memory_entry_repo() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture()
def todo_session(in_memory_entry_repo: InMemoryEntryRepository) -> TodoSession:
    return TodoSession.open(in_memory_entry_repo)
