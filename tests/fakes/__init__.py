"""
Fake implementations for testing.

This package provides in-memory fakes of the application ports for fast,
isolated testing. No filesystem or randomness involved.

Usage:
    from tests.fakes import FakeKeyValueStorage, SequentialIds, create_store

    storage = FakeKeyValueStorage()
    store = create_store(storage)
"""
from typing import Optional

from infrastructure.storage import DEFAULT_STORAGE_KEY, JsonDocumentStore
from tests.fakes.ids import SequentialIds
from tests.fakes.storage import FakeKeyValueStorage


def create_store(
    storage: Optional[FakeKeyValueStorage] = None,
    *,
    key: str = DEFAULT_STORAGE_KEY,
) -> JsonDocumentStore:
    """
    Create a JsonDocumentStore over a FakeKeyValueStorage.

    Args:
        storage: Existing fake storage to wrap (a new one by default)
        key: Slot name

    Returns:
        Document store backed by the fake
    """
    return JsonDocumentStore(storage if storage is not None else FakeKeyValueStorage(), key=key)


__all__ = [
    "FakeKeyValueStorage",
    "SequentialIds",
    "create_store",
]
