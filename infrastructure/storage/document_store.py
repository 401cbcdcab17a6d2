"""
JSON implementation of DocumentStore.

The whole document is serialized into one named slot of a KeyValueStorage.
Loading is self-healing: a missing or malformed slot is replaced by an
empty document instead of surfacing an error.
"""
import logging

from pydantic import ValidationError

from application.ports import KeyValueStorage
from domain.models import Document

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "workoutDB_v1"


class JsonDocumentStore:
    """
    DocumentStore over a single key of a KeyValueStorage.

    Nothing is cached: every ``load`` re-reads and re-parses the slot, so
    changes made to the storage between calls (e.g. a reset) are always
    observed, and callers always get their own copy.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize with the backing storage and slot name.

        Args:
            storage: Key-value storage (injected)
            key: Name of the slot holding the document
        """
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> Document:
        raw = self._storage.get_item(self._key)
        if raw is None:
            logger.info(f"Initialising empty document in slot '{self._key}'")
            return self._initialise()

        try:
            return Document.from_json(raw)
        except ValidationError as e:
            logger.error(f"Document in slot '{self._key}' is malformed, reinitialising: {e}")
            return self._initialise()

    def save(self, document: Document) -> None:
        self._storage.set_item(self._key, document.to_json())

    def reset(self) -> Document:
        self._storage.remove_item(self._key)
        return self.load()

    def _initialise(self) -> Document:
        document = Document.empty()
        self.save(document)
        return document
