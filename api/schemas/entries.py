"""
Entry request schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from domain.models import Number

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class EntryRequest(BaseModel):
    """
    Body of PUT /entries.

    Send the id returned by a previous save to update that entry; omit it
    to create a new one. ``date`` is required only when creating; fields
    left out of an update keep their stored values.
    """

    id: Optional[str] = None
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    pushups: Number = Field(default=0, ge=0)
    situps: Number = Field(default=0, ge=0)
    run_m: Number = Field(default=0, ge=0)
    notes: Optional[str] = ""


class EntryPatchRequest(BaseModel):
    """Body of PATCH /entries/{entry_id}."""

    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    pushups: Optional[Number] = Field(default=None, ge=0)
    situps: Optional[Number] = Field(default=None, ge=0)
    run_m: Optional[Number] = Field(default=None, ge=0)
    notes: Optional[str] = None
