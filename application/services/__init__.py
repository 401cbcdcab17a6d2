"""
Core services for the workout diary.

Each service performs its operations as full load -> mutate -> save cycles
through an injected DocumentStore. Dependencies are injected via
constructors for testability.

Usage:
    from application.services import AccountService, EntryService, TransferService

    accounts = AccountService(store=store, digest=sha256_hex, new_id=generate_user_id)
    entries = EntryService(store=store, new_id=generate_entry_id)
    transfer = TransferService(store=store, new_id=generate_user_id, indent=2)
"""

from application.services.account_service import AccountService
from application.services.entry_service import EntryService
from application.services.transfer_service import (
    ImportMode,
    TransferService,
    export_filename,
    parse_document,
)

__all__ = [
    "AccountService",
    "EntryService",
    "TransferService",
    "ImportMode",
    "export_filename",
    "parse_document",
]
