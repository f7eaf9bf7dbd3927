"""
Domain-split SQLAlchemy models.

Exposes `Base`, the timestamp helpers, and all ORM classes.
"""

from .base import Base, now_utc, today_utc, as_utc  # re-export

from .users import User
from .auth import UserAuth
from .questions import Question
from .answers import Answer

__all__ = [
    # base
    "Base",
    "now_utc",
    "today_utc",
    "as_utc",
    # users/auth
    "User",
    "UserAuth",
    # content
    "Question",
    "Answer",
]
