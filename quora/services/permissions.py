"""
Permission checks for question and answer mutations.

Key helpers:
- is_admin(user)
- can_edit(resource, user): owner only
- can_delete(resource, user): owner or admin
"""
from typing import Optional

from quora.db import models
from quora.utils.role_permissions import role_allows, role_is_admin


def is_admin(user: Optional[models.User]) -> bool:
    return bool(user is not None and role_is_admin(user.role))


def is_owner(resource, user: Optional[models.User]) -> bool:
    if resource is None or user is None:
        return False
    owner_id = getattr(resource, "user_id", None)
    return owner_id is not None and owner_id == user.id


def can_edit(resource, user: Optional[models.User]) -> bool:
    """Only the resource owner may change its content."""
    return is_owner(resource, user)


def can_delete(resource, user: Optional[models.User]) -> bool:
    """The resource owner, or any role allowed to delete others' content."""
    if is_owner(resource, user):
        return True
    return user is not None and role_allows(user.role, "can_delete_any")
