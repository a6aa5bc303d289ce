from typing import Dict, List

from models.user import User

EMPTY_NAME_KEY = "#"


def filter_users(users: List[User], query: str) -> List[User]:
    """Case-insensitive substring match on name, email or phone."""
    if not query:
        return list(users)
    needle = query.casefold()
    return [
        u for u in users
        if needle in u.name.casefold()
        or needle in u.email.casefold()
        or needle in u.phone.casefold()
    ]


def group_by_initial(users: List[User]) -> Dict[str, List[User]]:
    """
    Group users by the uppercase first letter of their name.

    Keys come out in lexicographic order; each group keeps the order of `users`.
    """
    groups: Dict[str, List[User]] = {}
    for user in users:
        key = user.name[:1].upper() or EMPTY_NAME_KEY
        groups.setdefault(key, []).append(user)
    return {key: groups[key] for key in sorted(groups)}
