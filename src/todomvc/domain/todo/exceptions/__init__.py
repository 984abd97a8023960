from .todo_exceptions import IndexOutOfRangeError, PersistenceError, TodoError

__all__ = ["IndexOutOfRangeError", "PersistenceError", "TodoError"]
