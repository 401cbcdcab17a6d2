"""
Read models for the dashboard: per-day progress against goals.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from domain.models.entry import Entry


class DaySummary(BaseModel):
    """Progress for a single calendar day."""

    date: str
    entry: Optional[Entry] = None
    progress: Dict[str, int] = Field(
        default_factory=dict,
        description="Percent of each goal reached (0-100), keyed by goal name",
    )

    @property
    def has_entry(self) -> bool:
        return self.entry is not None
