"""
Partial-update merging: ``merge(old, partial) -> new``.

Fields absent from the partial (unset or None) keep their old values.
Both functions return new models and never mutate their inputs.
"""

from typing import Any, Dict, Union

from domain.models import Entry, EntryUpdate, ProfileUpdate, User


def _provided(partial: Union[Entry, EntryUpdate, ProfileUpdate]) -> Dict[str, Any]:
    return partial.model_dump(exclude_unset=True, exclude_none=True)


def merge_profile(user: User, update: ProfileUpdate) -> User:
    """
    Apply a ProfileUpdate to a user.

    Name and email are replaced when given; age/height/weight and each goal
    are replaced individually, so ``goals={"pushups": 30}`` leaves situps and
    run_m untouched.

    Args:
        user: Stored user
        update: Partial profile update

    Returns:
        A new User with the update applied
    """
    changes = _provided(update)
    goal_changes = changes.pop("goals", {})

    goals = user.profile.goals.model_copy(update=goal_changes)
    profile_changes = {k: changes.pop(k) for k in ("age", "height", "weight") if k in changes}
    profile_changes["goals"] = goals
    profile = user.profile.model_copy(update=profile_changes)

    changes["profile"] = profile
    return user.model_copy(update=changes, deep=True)


def merge_entry(old: Entry, partial: Union[Entry, EntryUpdate]) -> Entry:
    """
    Shallow merge of an entry with new field values.

    The id of ``old`` is kept; ids are immutable once assigned.
    """
    changes = _provided(partial)
    changes.pop("id", None)
    return old.model_copy(update=changes)
