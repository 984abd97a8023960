from __future__ import annotations

import logging
from enum import Enum

from todomvc.domain.todo.entities.entry import Entry

logger = logging.getLogger(__name__)


class Filter(str, Enum):
    """Predicate selecting which entries a view shows.

    Member order is the display order of the filter links.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def fragment(self) -> str:
        return _FRAGMENTS[self]

    def matches(self, entry: Entry) -> bool:
        if self is Filter.ACTIVE:
            return not entry.completed
        if self is Filter.COMPLETED:
            return entry.completed
        return True

    @classmethod
    def ordered(cls) -> list[Filter]:
        return list(cls)

    @classmethod
    def from_fragment(cls, fragment: str | None) -> Filter:
        value = (fragment or "").strip()
        if value.startswith("#"):
            value = value[1:]
        if not value.startswith("/"):
            value = "/" + value
        if len(value) > 1:
            value = value.rstrip("/") or "/"
        for candidate in cls:
            if candidate.fragment[1:] == value:
                return candidate
        logger.debug("Unknown route fragment %r, falling back to %s", fragment, cls.ALL.label)
        return cls.ALL


_LABELS = {
    Filter.ALL: "All",
    Filter.ACTIVE: "Active",
    Filter.COMPLETED: "Completed",
}

_FRAGMENTS = {
    Filter.ALL: "#/",
    Filter.ACTIVE: "#/active",
    Filter.COMPLETED: "#/completed",
}
