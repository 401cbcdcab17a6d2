"""
Entries router.

Daily workout entries of the logged-in user.

Endpoints:
- GET /entries: All entries, most recent first
- GET /entries/week: Progress against goals for the last N days
- GET /entries/day/{date}: The entry for a day, or a blank unsaved one
- PUT /entries: Create or update an entry
- PATCH /entries/{entry_id}: Partially update an entry
- DELETE /entries/{entry_id}: Delete an entry
"""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import ValidationError

from api.deps import document_lock, get_current_user, get_entry_service
from api.errors import to_http_exception
from api.schemas import DATE_PATTERN, EntryPatchRequest, EntryRequest
from application.errors import StoreError
from application.services import EntryService
from domain.models import EntryUpdate, User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/entries",
    tags=["entries"],
)


@router.get("")
def list_entries(
    user: User = Depends(get_current_user),
    entries: EntryService = Depends(get_entry_service),
):
    """List the user's entries sorted by date, most recent first."""
    with document_lock:
        listed = entries.list_entries(user.id)
    return [e.model_dump(mode="json") for e in listed]


@router.get("/week")
def week_summary(
    days: int = Query(default=7, ge=1, le=366),
    today: Optional[date] = Query(default=None),
    user: User = Depends(get_current_user),
    entries: EntryService = Depends(get_entry_service),
):
    """
    Per-day progress against the user's goals, oldest day first.

    Each item has the day's entry (or null) and the percent of each goal
    reached, capped at 100.
    """
    try:
        with document_lock:
            summaries = entries.week_summary(user.id, today=today, days=days)
    except StoreError as e:
        raise to_http_exception(e)
    return [s.model_dump(mode="json") for s in summaries]


@router.get("/day/{day}")
def entry_for_day(
    day: str = Path(..., pattern=DATE_PATTERN),
    user: User = Depends(get_current_user),
    entries: EntryService = Depends(get_entry_service),
):
    """The stored entry for ``day``, or a blank one with ``id`` null."""
    with document_lock:
        entry = entries.entry_for_day(user.id, day)
    return entry.model_dump(mode="json")


@router.put("")
def save_entry(
    body: EntryRequest,
    user: User = Depends(get_current_user),
    entries: EntryService = Depends(get_entry_service),
):
    """
    Upsert an entry.

    With an id that exists, the provided fields are merged over the stored
    entry and ``date`` may be omitted. With an unknown id, the entry is
    created under that id. Without an id, a new id is generated. Creating
    an entry without a ``date`` returns 422.
    """
    try:
        with document_lock:
            saved = entries.save_entry(user.id, body.model_dump(exclude_unset=True))
    except StoreError as e:
        raise to_http_exception(e)
    except ValidationError:
        raise HTTPException(status_code=422, detail="A new entry needs a date")
    return saved.model_dump(mode="json")


@router.patch("/{entry_id}")
def update_entry(
    entry_id: str,
    body: EntryPatchRequest,
    user: User = Depends(get_current_user),
    entries: EntryService = Depends(get_entry_service),
):
    """Merge the provided fields over an existing entry. 404 if unknown."""
    updates = EntryUpdate.model_validate(body.model_dump(exclude_unset=True))
    try:
        with document_lock:
            updated = entries.update_entry(user.id, entry_id, updates)
    except StoreError as e:
        raise to_http_exception(e)
    return updated.model_dump(mode="json")


@router.delete("/{entry_id}")
def delete_entry(
    entry_id: str,
    user: User = Depends(get_current_user),
    entries: EntryService = Depends(get_entry_service),
):
    """Delete an entry. Unknown ids succeed without changing anything."""
    try:
        with document_lock:
            deleted = entries.delete_entry(user.id, entry_id)
    except StoreError as e:
        raise to_http_exception(e)
    return {"success": deleted}
