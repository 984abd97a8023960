from .session import TodoSession

__all__ = ["TodoSession"]
