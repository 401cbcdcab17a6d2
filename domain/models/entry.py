"""
Entry model: one day's workout progress for a single user.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

# Numeric values are coerced from strings, ints and floats the way form input
# arrives; ints stay ints so exported documents stay readable.
Number = Union[int, float]


class Entry(BaseModel):
    """
    Daily progress record.

    ``date`` (YYYY-MM-DD) is the natural key for "one entry per day" in the
    UI, but uniqueness by date is not enforced by the store. ``id`` is None
    until the entry is first saved.
    """

    id: Optional[str] = Field(default=None, description="Identifier, None for unsaved entries")
    date: str = Field(..., description="Calendar date in YYYY-MM-DD form")
    pushups: Number = Field(default=0, ge=0)
    situps: Number = Field(default=0, ge=0)
    run_m: Number = Field(default=0, ge=0)
    notes: Optional[str] = Field(default="")

    @classmethod
    def blank(cls, date: str) -> "Entry":
        """An unsaved entry with zero progress for the given day."""
        return cls(id=None, date=date, pushups=0, situps=0, run_m=0, notes="")


class EntryUpdate(BaseModel):
    """Partial update for an Entry. The id is never part of an update."""

    date: Optional[str] = None
    pushups: Optional[Number] = Field(default=None, ge=0)
    situps: Optional[Number] = Field(default=None, ge=0)
    run_m: Optional[Number] = Field(default=None, ge=0)
    notes: Optional[str] = None
