"""
Storage adapters.

Usage:
    from infrastructure.storage import FileKeyValueStorage, JsonDocumentStore

    store = JsonDocumentStore(FileKeyValueStorage("./data"), key="workoutDB_v1")
    doc = store.load()
"""

from infrastructure.storage.document_store import DEFAULT_STORAGE_KEY, JsonDocumentStore
from infrastructure.storage.file_storage import FileKeyValueStorage
from infrastructure.storage.memory_storage import InMemoryKeyValueStorage

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "JsonDocumentStore",
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
]
