"""
Entry ordering and lookup.
"""

from typing import List, Optional, Sequence

from domain.models import Entry


def sort_entries(entries: Sequence[Entry]) -> List[Entry]:
    """
    Return entries ordered by date, most recent first.

    ISO dates sort lexically. The sort is stable, so entries sharing a date
    keep their relative order.
    """
    return sorted(entries, key=lambda e: e.date, reverse=True)


def find_entry_by_date(entries: Sequence[Entry], date: str) -> Optional[Entry]:
    """First entry recorded for the given calendar day, if any."""
    for entry in entries:
        if entry.date == date:
            return entry
    return None
