from .browser_storage_entry_repository import BrowserStorageEntryRepository
from .in_memory_entry_repository import InMemoryEntryRepository
from .json_file_entry_repository import JsonFileEntryRepository
from .sqlmodel_entry_repository import SqlModelEntryRepository, StoredItem

__all__ = [
    "BrowserStorageEntryRepository",
    "InMemoryEntryRepository",
    "JsonFileEntryRepository",
    "SqlModelEntryRepository",
    "StoredItem",
]
