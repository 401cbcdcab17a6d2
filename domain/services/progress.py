"""
Goal progress for the dashboard.

Progress is the share of a daily goal reached, as a whole percent capped
at 100. A goal of zero (or less) always reports 0.
"""

import math
from datetime import date, timedelta
from typing import List, Sequence

from domain.models import DaySummary, Entry, Goals
from domain.services.ordering import find_entry_by_date

GOAL_KEYS = ("pushups", "situps", "run_m")


def goal_progress(value: float, target: float) -> int:
    """
    Percent of ``target`` reached by ``value``.

    Halves round up (52.5 -> 53).

    Examples:
        >>> goal_progress(5, 20)
        25
        >>> goal_progress(30, 20)
        100
        >>> goal_progress(5, 0)
        0
    """
    if target <= 0:
        return 0
    return min(100, int(math.floor(value / target * 100 + 0.5)))


def last_n_dates(n: int, today: date) -> List[str]:
    """ISO dates of the last ``n`` days ending with ``today``, oldest first."""
    return [(today - timedelta(days=offset)).isoformat() for offset in range(n - 1, -1, -1)]


def week_summary(
    entries: Sequence[Entry],
    goals: Goals,
    today: date,
    days: int = 7,
) -> List[DaySummary]:
    """
    Build one DaySummary per day for the last ``days`` days.

    Days without an entry get zero progress and ``entry=None``.

    Args:
        entries: The user's entries (any order)
        goals: The user's daily goals
        today: Last day of the window
        days: Window length

    Returns:
        Summaries ordered oldest first
    """
    summaries = []
    for iso in last_n_dates(days, today):
        entry = find_entry_by_date(entries, iso)
        progress = {
            key: goal_progress(getattr(entry, key) if entry else 0, getattr(goals, key))
            for key in GOAL_KEYS
        }
        summaries.append(DaySummary(date=iso, entry=entry, progress=progress))
    return summaries
