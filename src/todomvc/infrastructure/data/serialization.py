from __future__ import annotations

import json
from typing import Any, List, Sequence

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from todomvc.domain.todo.entities.entry import Entry
from todomvc.domain.todo.exceptions.todo_exceptions import PersistenceError


class StoredEntry(BaseModel):
    """Persisted shape of an entry. ``editing`` is UI state and is not stored."""

    model_config = ConfigDict(extra="ignore")

    description: str
    completed: bool = False

    @classmethod
    def from_entry(cls, entry: Entry) -> "StoredEntry":
        return cls(description=entry.description, completed=entry.completed)

    def to_entry(self) -> Entry:
        return Entry(description=self.description, completed=self.completed, editing=False)


_STORED_LIST = TypeAdapter(List[StoredEntry])


def entries_to_payload(entries: Sequence[Entry]) -> list[dict[str, Any]]:
    return [StoredEntry.from_entry(entry).model_dump() for entry in entries]


def entries_from_payload(payload: Any) -> list[Entry]:
    try:
        stored = _STORED_LIST.validate_python(payload)
    except ValidationError as exc:
        raise PersistenceError(f"Stored todo entries are malformed: {exc}") from exc
    return [item.to_entry() for item in stored]


def entries_to_json(entries: Sequence[Entry]) -> str:
    return json.dumps(entries_to_payload(entries), ensure_ascii=False)


def entries_from_json(raw: str) -> list[Entry]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PersistenceError(f"Stored todo entries are not valid JSON: {exc}") from exc
    return entries_from_payload(payload)
