from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Field, Session, SQLModel, create_engine

from todomvc.domain.repositories.entry_repository import STORAGE_KEY, EntryRepository
from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.exceptions.todo_exceptions import PersistenceError
from todomvc.infrastructure.data.serialization import entries_from_json, entries_to_json


class StoredItem(SQLModel, table=True):
    key: str = Field(primary_key=True)
    value: str = ""


class SqlModelEntryRepository(EntryRepository):
    """Key/value storage of the entry list in a SQL database."""

    def __init__(self, engine: Engine, key: str = STORAGE_KEY) -> None:
        self.engine = engine
        self.key = key
        try:
            SQLModel.metadata.create_all(engine, tables=[StoredItem.__table__])
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not prepare todo storage: {exc}") from exc

    @classmethod
    def from_url(cls, url: str, key: str = STORAGE_KEY) -> "SqlModelEntryRepository":
        return cls(create_engine(url), key=key)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with Session(self.engine) as session:
                yield session
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Todo storage failed: {exc}") from exc

    def load(self) -> Optional[list[Entry]]:
        with self._session() as session:
            item = session.get(StoredItem, self.key)
            if item is None:
                return None
            raw = item.value
        return entries_from_json(raw)

    def save(self, entries: Sequence[Entry]) -> None:
        value = entries_to_json(entries)
        with self._session() as session:
            item = session.get(StoredItem, self.key)
            if item is None:
                item = StoredItem(key=self.key, value=value)
            else:
                item.value = value
            session.add(item)
            session.commit()
