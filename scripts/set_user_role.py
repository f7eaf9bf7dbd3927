"""
Script to change a registered user's role, e.g. to promote the first admin.

Usage:
    python scripts/set_user_role.py <user_name> <admin|nonadmin>
"""

import argparse
import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quora.db.database import get_db
from quora.db.repositories import users as users_repo
from quora.utils.role_permissions import RoleEnum, normalize_role, validate_role


def set_user_role(user_name: str, role: str) -> int:
    """Update the stored role for ``user_name``. Returns a process exit code."""
    try:
        new_role = validate_role(role)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    db = next(get_db())
    try:
        user = users_repo.get_user_by_user_name(db, user_name)
        if user is None:
            print(f"Error: user '{user_name}' does not exist")
            return 1
        old_role = user.role
        users_repo.set_role(db, user=user, role=new_role)
        print(f"Updated user {user.id} ({user_name}): role {old_role} -> {new_role}")
        return 0
    except Exception as e:
        db.rollback()
        print(f"Error updating role: {e}")
        raise
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Set the role of an existing user.")
    parser.add_argument("user_name", help="user name given at sign-up")
    parser.add_argument(
        "role",
        type=normalize_role,
        choices=[role.value for role in RoleEnum],
        help="new role (case-insensitive)",
    )
    args = parser.parse_args(argv)
    return set_user_role(args.user_name, args.role)


if __name__ == "__main__":
    sys.exit(main())
