"""
Storage Interfaces (Ports).

Defines the key-value slot storage the document lives in and the Document
Store built over it. Implementations may use a directory of files, process
memory, or any other string key-value backend.
"""
from typing import Optional, Protocol

from domain.models import Document


class KeyValueStorage(Protocol):
    """
    Persistent string key-value storage.

    Mirrors the browser's localStorage contract: values are whole strings,
    a missing key reads as None, and writes replace the previous value.
    """

    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under ``key``.

        Returns:
            The stored string, or None if the key is absent
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""
        ...


class DocumentStore(Protocol):
    """
    Owner of the single persisted Document.

    Every call re-reads storage; nothing is cached between calls, so the
    returned Document is a private copy the caller may mutate freely
    before handing it back to ``save``.
    """

    def load(self) -> Document:
        """
        Read the persisted document.

        An absent or malformed slot is replaced by an empty document, which
        is persisted and returned. Corruption never raises.
        """
        ...

    def save(self, document: Document) -> None:
        """Persist the complete document, overwriting previous content."""
        ...

    def reset(self) -> Document:
        """Drop the slot and re-initialise it with an empty document."""
        ...
