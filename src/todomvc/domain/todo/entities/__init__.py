from .entry import Entry
from .filter import Filter

__all__ = ["Entry", "Filter"]
