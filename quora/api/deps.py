"""
API dependency helpers.

Resolves the signed-in user from the ``authorization`` header for routes.
"""
from typing import Callable, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from quora.constants import UserAction
from quora.db import models
from quora.db.database import get_db
from quora.services.answer_service import AnswerService
from quora.services.question_service import QuestionService
from quora.services.user_service import UserService
from quora.utils.token_crypto import extract_bearer

# Contract:
# Returns the ORM User owning a valid, signed-in, unexpired access token.
# Raises AuthorizationFailedError (403) otherwise; see UserService.get_current_user.


def get_access_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    return extract_bearer(authorization)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_question_service(db: Session = Depends(get_db)) -> QuestionService:
    return QuestionService(db)


def get_answer_service(db: Session = Depends(get_db)) -> AnswerService:
    return AnswerService(db)


def require_user(action: UserAction) -> Callable[..., models.User]:
    """Build a dependency returning the current user for ``action``."""

    def _current_user(
        service: UserService = Depends(get_user_service),
        access_token: Optional[str] = Depends(get_access_token),
    ) -> models.User:
        return service.get_current_user(access_token, action)

    _current_user.__name__ = f"current_user_for_{action.value}"
    return _current_user
