from .entities import Entry, Filter
from .exceptions import IndexOutOfRangeError, PersistenceError, TodoError
from .state import TodoListState, resolve_visible_index

__all__ = [
    "Entry",
    "Filter",
    "IndexOutOfRangeError",
    "PersistenceError",
    "TodoError",
    "TodoListState",
    "resolve_visible_index",
]
