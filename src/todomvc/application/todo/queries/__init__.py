from .todo_view import TodoViewQuery

__all__ = ["TodoViewQuery"]
