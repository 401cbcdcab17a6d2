"""
Interfaces (Ports) for the workout diary.

This package defines abstract interfaces that decouple the services from
infrastructure (storage backends, hashing, id generation). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the services need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import DocumentStore

    class EntryService:
        def __init__(self, store: DocumentStore):
            self._store = store
"""

# Storage
from application.ports.storage import DocumentStore, KeyValueStorage

# Hashing and identifiers
from application.ports.security import DigestProvider, IdGenerator

__all__ = [
    # Storage
    "KeyValueStorage",
    "DocumentStore",
    # Security
    "DigestProvider",
    "IdGenerator",
]
