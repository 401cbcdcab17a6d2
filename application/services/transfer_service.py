"""
Transfer Service.

Export the whole document, import a document (overwrite or merge), and
reset storage to an empty document.
"""

import json
import logging
from datetime import date
from enum import Enum
from typing import Optional, Union

from pydantic import ValidationError

from application.errors import InvalidFormat
from application.ports import DocumentStore, IdGenerator
from domain.models import Document, Session
from domain.services import reconcile_users

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("users", "sessions")


def export_filename(day: Optional[date] = None) -> str:
    """Default file name for an export taken on ``day`` (today by default)."""
    return f"workout-db-{(day or date.today()).isoformat()}.json"


class ImportMode(str, Enum):
    """How an imported document is combined with the stored one."""

    OVERWRITE = "overwrite"
    MERGE = "merge"


def parse_document(serialized: str) -> Document:
    """
    Parse and validate an incoming serialized document.

    Raises:
        InvalidFormat: If the text is not JSON, not an object, lacks the
            ``users`` or ``sessions`` keys, or does not match the document shape
    """
    try:
        raw = json.loads(serialized)
    except (TypeError, ValueError) as e:
        raise InvalidFormat(f"Import failed: not valid JSON ({e})")

    if not isinstance(raw, dict):
        raise InvalidFormat("Import failed: document must be a JSON object")
    missing = [key for key in REQUIRED_KEYS if raw.get(key) is None]
    if missing:
        raise InvalidFormat(f"Import failed: missing keys {', '.join(missing)}")

    try:
        return Document.model_validate(raw)
    except ValidationError as e:
        raise InvalidFormat(f"Import failed: {e.error_count()} invalid field(s)")


class TransferService:
    """
    Import/export of the persisted document.

    Merge imports never overwrite local users: an incoming user whose id is
    already taken is stored under a freshly generated id.

    Usage:
        >>> transfer = TransferService(store=store, new_id=generate_user_id)
        >>> snapshot = transfer.export_document()
        >>> transfer.import_document(snapshot, ImportMode.OVERWRITE)
        True
    """

    def __init__(
        self,
        store: DocumentStore,
        new_id: IdGenerator,
        indent: Optional[int] = None,
    ) -> None:
        """
        Initialize the service with required dependencies.

        Args:
            store: Document store to export from and import into
            new_id: Generator for user ids assigned on merge collisions
            indent: Pretty-print indent for exports (None for compact)
        """
        self._store = store
        self._new_id = new_id
        self._indent = indent

    def export_document(self) -> str:
        """Serialize the full current document."""
        return self._store.load().to_json(indent=self._indent)

    def import_document(
        self,
        serialized: str,
        mode: Union[ImportMode, str] = ImportMode.OVERWRITE,
    ) -> bool:
        """
        Import a serialized document.

        - overwrite: the stored document is replaced wholesale
        - merge: incoming users are added next to local ones, re-keyed on id
          collision; the incoming session pointer wins when it is set,
          otherwise the local session is kept

        Raises:
            InvalidFormat: If the input cannot be parsed as a document
            ValueError: If ``mode`` is not a known import mode

        Returns:
            True on success
        """
        mode = ImportMode(mode)
        incoming = parse_document(serialized)

        if mode is ImportMode.OVERWRITE:
            self._store.save(incoming)
            logger.info(f"Document imported (overwrite): {len(incoming.users)} user(s)")
            return True

        current = self._store.load()
        users, renames = reconcile_users(current.users, incoming.users, self._new_id)

        session_user = incoming.sessions.current_user_id
        if session_user:
            session_user = renames.get(session_user, session_user)
        else:
            session_user = current.sessions.current_user_id

        merged = Document(users=users, sessions=Session(current_user_id=session_user))
        self._store.save(merged)

        logger.info(
            f"Document imported (merge): {len(incoming.users)} incoming user(s), "
            f"{len(renames)} re-keyed on id collision"
        )
        return True

    def reset(self) -> Document:
        """Wipe all users and sessions, leaving an empty document."""
        logger.warning("Resetting document storage")
        return self._store.reset()
