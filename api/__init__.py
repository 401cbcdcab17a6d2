"""
API package for the workout diary.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Mapping from service errors to HTTP errors
- schemas/: Request validation models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    document_lock,
    get_account_service,
    get_current_user,
    get_document_store,
    get_entry_service,
    get_settings,
    get_storage,
    get_transfer_service,
)

__all__ = [
    # Settings
    "get_settings",
    # Storage
    "get_storage",
    "get_document_store",
    # Services
    "get_account_service",
    "get_entry_service",
    "get_transfer_service",
    # Auth
    "get_current_user",
    # Document access
    "document_lock",
]
