"""
Domain models for the workout diary.

This package contains pure domain models that are independent of
infrastructure concerns (storage slot, HTTP, CLI).

These models represent the core business concepts:
- Document: The persisted root holding all users and the session pointer
- User: An account with profile, goals and owned entries
- Entry: One day's progress counters and notes
- ProfileUpdate / EntryUpdate: Partial updates where every field is optional
- DaySummary: Read model for per-day progress against goals

Usage:
    >>> from domain.models import Document, User, Entry

    >>> doc = Document.empty()
    >>> doc.users["u1"] = User(id="u1", email="a@x.com", name="Alex", passwordHash="...")
    >>> json_str = doc.to_json(indent=2)
    >>> Document.from_json(json_str).users["u1"].name
    'Alex'
"""

from domain.models.document import Document, Session
from domain.models.entry import Entry, EntryUpdate, Number
from domain.models.summary import DaySummary
from domain.models.user import Goals, GoalsUpdate, Profile, ProfileUpdate, User

__all__ = [
    # Root
    "Document",
    "Session",
    # Entities
    "User",
    "Profile",
    "Goals",
    "Entry",
    # Partial updates
    "ProfileUpdate",
    "GoalsUpdate",
    "EntryUpdate",
    # Read models
    "DaySummary",
    # Types
    "Number",
]
