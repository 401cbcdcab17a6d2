"""
Fake KeyValueStorage for testing.

Wraps a dict like InMemoryKeyValueStorage but also records every write, so
tests can assert that failed operations persisted nothing.
"""
from typing import Dict, List, Optional


class FakeKeyValueStorage:
    """
    In-memory KeyValueStorage with write tracking.

    Usage:
        storage = FakeKeyValueStorage()
        storage.seed_raw("workoutDB_v1", "{not json")
        store = JsonDocumentStore(storage)
        store.load()  # self-heals
        assert storage.write_count == 1
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._items: Dict[str, str] = {}
        self.writes: List[str] = []
        self.removals: List[str] = []

    def reset(self) -> None:
        """Clear stored items and recorded calls."""
        self._items.clear()
        self.writes.clear()
        self.removals.clear()

    def seed_raw(self, key: str, value: str) -> None:
        """Store a raw value without recording a write."""
        self._items[key] = value

    def raw(self, key: str) -> Optional[str]:
        """Read a raw value (test helper)."""
        return self._items.get(key)

    @property
    def write_count(self) -> int:
        return len(self.writes)

    # =========================================================================
    # KeyValueStorage Protocol Methods
    # =========================================================================

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes.append(key)
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self.removals.append(key)
        self._items.pop(key, None)
