"""
Role constants and role-based permission helpers for users.

Roles are stored lowercase on the user row; comparisons are case-insensitive
so rows written by other tools with different casing still resolve.
"""

from enum import Enum
from typing import Optional


ROLE_ADMIN = "admin"
ROLE_NONADMIN = "nonadmin"

ROLE_PERMISSIONS = {
    ROLE_ADMIN: {
        "can_delete_any": True,
        "can_delete_users": True,
    },
    ROLE_NONADMIN: {
        "can_delete_any": False,
        "can_delete_users": False,
    },
}

ALLOWED_ROLES = set(ROLE_PERMISSIONS.keys())


class RoleEnum(str, Enum):
    """Roles accepted on the command line by scripts/set_user_role.py."""
    admin = ROLE_ADMIN
    nonadmin = ROLE_NONADMIN


def normalize_role(role: Optional[str]) -> str:
    return (role or "").strip().lower()


def validate_role(role: str) -> str:
    """Return the normalized role, raising ValueError if it is not allowed."""
    key = normalize_role(role)
    if key not in ALLOWED_ROLES:
        raise ValueError(f"Invalid role '{role}'. Allowed roles: {sorted(ALLOWED_ROLES)}")
    return key


def role_is_admin(role: Optional[str]) -> bool:
    """Return True if the role is the privileged admin role."""
    return normalize_role(role) == ROLE_ADMIN


def role_allows(role: Optional[str], permission: str) -> bool:
    """Return True if ``role`` grants ``permission``; unknown roles grant nothing."""
    return ROLE_PERMISSIONS.get(normalize_role(role), {}).get(permission, False)
