"""
Pure domain functions for the workout diary.

Nothing in this package reads or writes storage; every function takes
domain models and returns new ones, so each is unit testable in isolation.
"""

from domain.services.merge import merge_entry, merge_profile
from domain.services.ordering import find_entry_by_date, sort_entries
from domain.services.progress import GOAL_KEYS, goal_progress, last_n_dates, week_summary
from domain.services.reconcile import reconcile_users

__all__ = [
    "merge_entry",
    "merge_profile",
    "find_entry_by_date",
    "sort_entries",
    "GOAL_KEYS",
    "goal_progress",
    "last_n_dates",
    "week_summary",
    "reconcile_users",
]
