from .entry_repository import STORAGE_KEY, EntryRepository

__all__ = ["STORAGE_KEY", "EntryRepository"]
