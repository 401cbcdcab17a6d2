"""
Entry Service.

Create, update, delete and list a user's daily workout entries. After
every mutating call the user's entries are re-sorted by date, most recent
first, before the document is saved.
"""

import logging
from datetime import date as date_type
from typing import List, Mapping, Optional, Tuple, Union

from application.errors import EntryNotFound, UserNotFound
from application.ports import DocumentStore, IdGenerator
from domain.models import DaySummary, Document, Entry, EntryUpdate, User
from domain.services import find_entry_by_date, merge_entry, sort_entries, week_summary

logger = logging.getLogger(__name__)


def _require_user(doc: Document, user_id: str) -> User:
    user = doc.users.get(user_id)
    if user is None:
        raise UserNotFound()
    return user


def _split_upsert(
    entry: Union[Entry, Mapping[str, object]],
) -> Tuple[Optional[str], Union[Entry, EntryUpdate]]:
    """Separate the caller's id from the fields to store."""
    if isinstance(entry, Entry):
        return entry.id, entry
    data = dict(entry)
    entry_id = data.pop("id", None)
    return entry_id, EntryUpdate.model_validate(data)


def _as_new_entry(fields: Union[Entry, EntryUpdate], entry_id: str) -> Entry:
    if isinstance(fields, Entry):
        return fields.model_copy(update={"id": entry_id})
    data = fields.model_dump(exclude_unset=True, exclude_none=True)
    data["id"] = entry_id
    return Entry.model_validate(data)


class EntryService:
    """
    Workout entry operations for one document.

    ``save_entry`` trusts caller-supplied ids: an id that matches nothing is
    stored as a new entry under that id rather than being replaced.

    Usage:
        >>> entries = EntryService(store=store, new_id=generate_entry_id)
        >>> saved = entries.save_entry(user_id, Entry(date="2024-01-01", pushups=5))
        >>> entries.save_entry(user_id, Entry(id=saved.id, date="2024-01-01", pushups=10))
        >>> [e.pushups for e in entries.list_entries(user_id)]
        [10]
    """

    def __init__(self, store: DocumentStore, new_id: IdGenerator) -> None:
        """
        Initialize the service with required dependencies.

        Args:
            store: Document store holding users and their entries
            new_id: Generator for entry identifiers
        """
        self._store = store
        self._new_id = new_id

    def save_entry(
        self,
        user_id: str,
        entry: Union[Entry, Mapping[str, object]],
    ) -> Entry:
        """
        Upsert an entry.

        - id matches a stored entry: shallow merge, fields absent from
          ``entry`` keep their stored values (a mapping may omit ``date``)
        - id given but unknown: appended as-is under that id
        - no id: a new id is generated and the entry appended

        Raises:
            UserNotFound: If the user does not exist
            ValidationError: If an appended entry lacks a ``date``

        Returns:
            Copy of the saved entry
        """
        entry_id, fields = _split_upsert(entry)

        doc = self._store.load()
        user = _require_user(doc, user_id)
        entries = list(user.entries)

        index = None
        if entry_id:
            index = next((i for i, e in enumerate(entries) if e.id == entry_id), None)

        if index is not None:
            saved = merge_entry(entries[index], fields)
            entries[index] = saved
        else:
            if not entry_id:
                taken = {e.id for e in entries}
                entry_id = self._new_id()
                while entry_id in taken:
                    entry_id = self._new_id()
            saved = _as_new_entry(fields, entry_id)
            entries.append(saved)

        user.entries = sort_entries(entries)
        self._store.save(doc)

        logger.info(f"Entry {saved.id} saved for user {user_id} ({saved.date})")
        return saved.model_copy()

    def update_entry(
        self,
        user_id: str,
        entry_id: str,
        updates: Union[EntryUpdate, Mapping[str, object]],
    ) -> Entry:
        """
        Shallow-merge ``updates`` over an existing entry.

        Raises:
            UserNotFound: If the user does not exist
            EntryNotFound: If the entry id does not exist for this user
        """
        if not isinstance(updates, EntryUpdate):
            updates = EntryUpdate.model_validate(dict(updates))

        doc = self._store.load()
        user = _require_user(doc, user_id)
        entries = list(user.entries)

        index = next((i for i, e in enumerate(entries) if e.id == entry_id), None)
        if index is None:
            raise EntryNotFound()

        merged = merge_entry(entries[index], updates)
        entries[index] = merged
        user.entries = sort_entries(entries)
        self._store.save(doc)

        logger.info(f"Entry {entry_id} updated for user {user_id}")
        return merged.model_copy()

    def delete_entry(self, user_id: str, entry_id: str) -> bool:
        """
        Remove an entry.

        Deleting an unknown id is a no-op that still reports True.

        Raises:
            UserNotFound: If the user does not exist
        """
        doc = self._store.load()
        user = _require_user(doc, user_id)
        remaining = [e for e in user.entries if e.id != entry_id]
        if len(remaining) != len(user.entries):
            logger.info(f"Entry {entry_id} deleted for user {user_id}")

        user.entries = sort_entries(remaining)
        self._store.save(doc)
        return True

    def list_entries(self, user_id: str) -> List[Entry]:
        """
        A user's entries, most recent first.

        Returns an empty list for an unknown user.
        """
        user = self._store.load().users.get(user_id)
        if user is None:
            return []
        return [e.model_copy() for e in sort_entries(user.entries)]

    def find_entry_by_date(self, user_id: str, date: str) -> Optional[Entry]:
        """The stored entry for a calendar day, or None."""
        return find_entry_by_date(self.list_entries(user_id), date)

    def entry_for_day(self, user_id: str, date: str) -> Entry:
        """
        The stored entry for a day, or an unsaved blank one.

        Callers edit the returned entry and pass it to ``save_entry``; a
        blank entry has no id, so saving it creates a new record.
        """
        return self.find_entry_by_date(user_id, date) or Entry.blank(date)

    def week_summary(
        self,
        user_id: str,
        today: Optional[date_type] = None,
        days: int = 7,
    ) -> List[DaySummary]:
        """
        Progress against goals for the last ``days`` days, oldest first.

        Raises:
            UserNotFound: If the user does not exist
        """
        user = _require_user(self._store.load(), user_id)
        return week_summary(
            user.entries,
            user.profile.goals,
            today or date_type.today(),
            days=days,
        )
