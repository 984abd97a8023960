from __future__ import annotations


class TodoError(Exception):
    """Base class for todo list errors."""


class IndexOutOfRangeError(TodoError, IndexError):
    def __init__(self, visible_idx: int, visible_count: int) -> None:
        super().__init__(
            f"Visible index {visible_idx} is out of range for a view of {visible_count} entries."
        )
        self.visible_idx = visible_idx
        self.visible_count = visible_count


class PersistenceError(TodoError, RuntimeError):
    pass
