from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from todomvc.domain.repositories.entry_repository import STORAGE_KEY, EntryRepository
from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.exceptions.todo_exceptions import PersistenceError
from todomvc.infrastructure.data.serialization import (
    entries_from_payload,
    entries_to_payload,
)

logger = logging.getLogger(__name__)


class CorruptDocumentError(PersistenceError):
    pass


class JsonFileEntryRepository(EntryRepository):
    """Stores the entry list in a JSON document under a fixed key."""

    def __init__(self, path: Path | str, key: str = STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def load(self) -> Optional[list[Entry]]:
        if not self.path.exists():
            return None
        document = self._read_document()
        if self.key not in document:
            return None
        return entries_from_payload(document[self.key])

    def save(self, entries: Sequence[Entry]) -> None:
        document = self._existing_document()
        document[self.key] = entries_to_payload(entries)
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise PersistenceError(f"Could not write {self.path}: {exc}") from exc
        logger.debug("Saved %d entries to %s", len(entries), self.path)

    def _existing_document(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            return self._read_document()
        except CorruptDocumentError as exc:
            logger.warning("Overwriting unreadable todo file: %s", exc)
            return {}

    def _read_document(self) -> dict:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Could not read {self.path}: {exc}") from exc
        if not raw.strip():
            return {}
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CorruptDocumentError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise CorruptDocumentError(f"{self.path} does not contain a JSON object")
        return document
