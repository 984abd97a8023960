from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from sqlalchemy.engine import make_url

from todomvc.application.todo.session import TodoSession
from todomvc.domain.repositories.entry_repository import EntryRepository
from todomvc.infrastructure.data.repositories import (
    BrowserStorageEntryRepository,
    InMemoryEntryRepository,
    JsonFileEntryRepository,
    SqlModelEntryRepository,
)
from todomvc.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    repository_factory: Callable[[], EntryRepository]

    def create_repository(self) -> EntryRepository:
        return self.repository_factory()

    def open_session(self) -> TodoSession:
        return TodoSession.open(self.create_repository())


def _ensure_sqlite_dir(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite" or not parsed.database or parsed.database == ":memory:":
        return
    Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)


def _build_repository_factory(settings: Settings) -> Callable[[], EntryRepository]:
    if settings.storage == "memory":
        shared = InMemoryEntryRepository()
        return lambda: shared
    if settings.storage == "json":
        json_repo = JsonFileEntryRepository(settings.json_path)
        return lambda: json_repo
    if settings.storage == "sqlite":
        _ensure_sqlite_dir(settings.db_url)
        sql_repo = SqlModelEntryRepository.from_url(settings.db_url)
        return lambda: sql_repo
    return BrowserStorageEntryRepository


def create_app_container(settings: Optional[Settings] = None) -> AppContainer:
    settings = settings or Settings.from_env()
    logger.info("Using %s storage for todo entries", settings.storage)
    return AppContainer(
        settings=settings,
        repository_factory=_build_repository_factory(settings),
    )
