"""
Storage wiring from Settings.

Builds the KeyValueStorage and DocumentStore the configured backend asks
for. Shared by the HTTP app and the CLI.
"""

import logging
from typing import Optional

from application.ports import DocumentStore, KeyValueStorage
from backend.settings import Settings
from infrastructure.storage import FileKeyValueStorage, InMemoryKeyValueStorage, JsonDocumentStore

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> KeyValueStorage:
    """
    Create the slot storage for ``settings.storage_backend``.

    Args:
        settings: Application settings

    Returns:
        KeyValueStorage: file-backed or in-memory storage
    """
    if settings.storage_backend == "memory":
        logger.info("Using in-memory document storage")
        return InMemoryKeyValueStorage()

    logger.info(f"Using file document storage in {settings.storage_dir}")
    return FileKeyValueStorage(settings.storage_dir)


def create_document_store(settings: Settings, storage: Optional[KeyValueStorage] = None) -> DocumentStore:
    """Create the Document Store over ``storage`` (or a new one from settings)."""
    if storage is None:
        storage = create_storage(settings)
    return JsonDocumentStore(storage, key=settings.storage_key)
