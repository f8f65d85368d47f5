"""
Target role resolution.

Both engines look up role tables by free-text target role. The rule is the same
everywhere: the first key, in the table's declaration order, that occurs as a
case-insensitive substring of the target role wins.

Examples:
    >>> resolve_role("Senior Frontend Engineer", {"frontend": (), "backend": ()})
    'frontend'
    >>> resolve_role("Data Engineer (backend)", {"backend": (), "data": ()})
    'backend'
    >>> resolve_role("Chef", {"frontend": ()}) is None
    True
"""

from typing import Mapping, Optional, Tuple


def resolve_role(target_role: Optional[str], table: Mapping[str, object]) -> Optional[str]:
    """
    Find the table key that matches a free-text target role.

    Args:
        target_role: Role text as typed by the user (may be None or empty)
        table: Role-keyed table; iteration order is the match priority

    Returns:
        Matching key, or None if the role is empty or nothing matches
    """
    if not target_role:
        return None

    role_lower = target_role.lower()
    for key in table:
        if key.lower() in role_lower:
            return key

    return None


def role_entries(target_role: Optional[str], table: Mapping[str, Tuple[str, ...]]) -> Tuple[str, ...]:
    """
    Return the entries of the matched role, or an empty tuple if none matches.

    Args:
        target_role: Role text as typed by the user (may be None or empty)
        table: Role-keyed table of ordered entries

    Returns:
        Ordered entries for the first matching role key
    """
    key = resolve_role(target_role, table)
    if key is None:
        return ()
    return tuple(table[key])
