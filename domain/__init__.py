"""
Domain layer for the workout diary.

This package contains pure domain models and pure functions over them
(merging partial updates, ordering entries, reconciling imported users,
computing goal progress). Nothing here touches storage.
"""

from domain.models import (
    DaySummary,
    Document,
    Entry,
    EntryUpdate,
    Goals,
    GoalsUpdate,
    Profile,
    ProfileUpdate,
    Session,
    User,
)

__all__ = [
    "DaySummary",
    "Document",
    "Entry",
    "EntryUpdate",
    "Goals",
    "GoalsUpdate",
    "Profile",
    "ProfileUpdate",
    "Session",
    "User",
]
