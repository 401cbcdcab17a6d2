"""
In-memory implementation of KeyValueStorage.

Values live only as long as the process. Strings are immutable, so every
read still produces a fresh document when parsed.
"""
from typing import Dict, Optional


class InMemoryKeyValueStorage:
    """Dict-backed KeyValueStorage."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
