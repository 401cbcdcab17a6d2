"""
FastAPI Dependency Providers for the workout diary.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) or services built over them. This enables clean
separation of concerns and easy testing with in-memory storage.

Architecture:
- Settings and slot storage are cached per-process (lru_cache)
- Document store and services are created per-request; they hold no state
  beyond the injected storage, so this is cheap
- The current user is whoever the document's session pointer references
- Service calls that touch the document run under `document_lock`, so
  concurrent requests never interleave a load -> mutate -> save cycle

Usage in routers:
    from api.deps import get_entry_service, get_current_user

    @router.get("/entries")
    def list_entries(
        user: User = Depends(get_current_user),
        entries: EntryService = Depends(get_entry_service),
    ):
        return entries.list_entries(user.id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_document_store] = lambda: JsonDocumentStore(InMemoryKeyValueStorage())
"""

import threading
from functools import lru_cache

from fastapi import Depends, HTTPException, status

from application.ports import DocumentStore, KeyValueStorage
from application.services import AccountService, EntryService, TransferService
from backend.settings import Settings, get_settings as _get_settings
from backend.storage import create_document_store, create_storage
from domain.models import User
from infrastructure.security import generate_entry_id, generate_user_id, sha256_hex


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Storage Providers
# =============================================================================


@lru_cache
def get_storage() -> KeyValueStorage:
    """
    Get the slot storage (cached).

    Cached for the lifetime of the process so the in-memory backend keeps
    its contents between requests. Settings are read directly so that the
    cache key stays empty.

    Returns:
        KeyValueStorage: Storage for the configured backend
    """
    return create_storage(_get_settings())


# =============================================================================
# Document Access
# =============================================================================

# Every service call that loads and saves the shared document runs while
# holding this lock; handlers run concurrently in the threadpool.
document_lock = threading.Lock()


def get_document_store(
    storage: KeyValueStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> DocumentStore:
    """
    Get the Document Store over the configured slot.

    Returns:
        DocumentStore: Store for the single persisted document
    """
    return create_document_store(settings, storage)


# =============================================================================
# Service Providers
# =============================================================================


def get_account_service(
    store: DocumentStore = Depends(get_document_store),
) -> AccountService:
    """Get AccountService with SHA-256 password digests."""
    return AccountService(store=store, digest=sha256_hex, new_id=generate_user_id)


def get_entry_service(
    store: DocumentStore = Depends(get_document_store),
) -> EntryService:
    """Get EntryService."""
    return EntryService(store=store, new_id=generate_entry_id)


def get_transfer_service(
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
) -> TransferService:
    """Get TransferService with the configured export indent."""
    return TransferService(store=store, new_id=generate_user_id, indent=settings.export_indent)


# =============================================================================
# Auth Providers
# =============================================================================


def get_current_user(
    accounts: AccountService = Depends(get_account_service),
) -> User:
    """
    Get the logged-in user.

    Raises:
        HTTPException: 401 if there is no active session
    """
    with document_lock:
        user = accounts.current_user()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return user
