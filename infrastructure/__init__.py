"""
Infrastructure Layer for the workout diary.

This package contains concrete implementations of the application ports:
- storage/: Key-value slot storage (file directory, in-memory) and the
  JSON Document Store built over it
- security/: SHA-256 digest provider and random id generators
"""

from infrastructure.security import (
    generate_entry_id,
    generate_id,
    generate_user_id,
    sha256_hex,
)
from infrastructure.storage import (
    DEFAULT_STORAGE_KEY,
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    JsonDocumentStore,
)

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "FileKeyValueStorage",
    "InMemoryKeyValueStorage",
    "JsonDocumentStore",
    "sha256_hex",
    "generate_id",
    "generate_user_id",
    "generate_entry_id",
]
