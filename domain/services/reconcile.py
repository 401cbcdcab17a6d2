"""
Reconciliation of imported users with local users.

Used by merge imports: incoming users are adopted under their own id unless
that id is already taken locally, in which case they are re-keyed under a
fresh id. Local users are never overwritten.
"""

from typing import Callable, Dict, Mapping, Tuple

from domain.models import User


def reconcile_users(
    local: Mapping[str, User],
    incoming: Mapping[str, User],
    new_id: Callable[[], str],
) -> Tuple[Dict[str, User], Dict[str, str]]:
    """
    Combine two id-keyed user mappings without overwriting local users.

    A colliding incoming user gets a generated id that is free in both
    mappings; its own ``id`` field is rewritten to match.

    Args:
        local: Users already stored
        incoming: Users from the imported document
        new_id: Identifier generator

    Returns:
        (combined users, rename table of incoming id -> new id)

    Examples:
        >>> combined, renames = reconcile_users(local, incoming, generate_user_id)
        >>> for old, new in renames.items():
        ...     assert combined[new].id == new
    """
    combined: Dict[str, User] = dict(local)
    renames: Dict[str, str] = {}
    taken = set(local) | set(incoming)

    for user_id, user in incoming.items():
        if user_id not in combined:
            combined[user_id] = user
            continue

        fresh = new_id()
        while fresh in taken:
            fresh = new_id()
        taken.add(fresh)

        combined[fresh] = user.model_copy(update={"id": fresh})
        renames[user_id] = fresh

    return combined, renames
