"""
Question service: create, list, edit and delete questions with ownership
checks applied after the question lookup.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from quora.services.permissions import can_delete, can_edit
from quora.db import models
from quora.db.repositories import questions as questions_repo
from quora.db.repositories import users as users_repo
from quora.errors import (
    AuthorizationFailedError,
    ErrorCondition,
    InvalidQuestionError,
    UserNotFoundError,
)
from quora.services.user_service import parse_uuid_maybe

logger = logging.getLogger(__name__)


class QuestionService:
    def __init__(self, db: Session):
        self.db = db

    def create(self, user: models.User, content: str) -> models.Question:
        question = questions_repo.create_question(self.db, user_id=user.id, content=content)
        logger.debug("question_created id=%s user_id=%s", question.id, user.id)
        return question

    def list_all(self) -> List[models.Question]:
        return questions_repo.list_questions(self.db)

    def get(
        self,
        question_id: Optional[str],
        *,
        not_found: ErrorCondition = ErrorCondition.QUES_NOT_FOUND,
    ) -> models.Question:
        """Return the question or raise InvalidQuestionError with ``not_found``."""
        qid = parse_uuid_maybe(question_id)
        question = questions_repo.get_question(self.db, qid) if qid else None
        if question is None:
            raise InvalidQuestionError(not_found)
        return question

    def edit(self, user: models.User, question_id: Optional[str], content: str) -> models.Question:
        question = self.get(question_id)
        if not can_edit(question, user):
            raise AuthorizationFailedError(ErrorCondition.QUES_EDIT_UNAUTHORIZED)
        return questions_repo.update_question_content(self.db, question=question, content=content)

    def delete(self, user: models.User, question_id: Optional[str]):
        question = self.get(question_id)
        if not can_delete(question, user):
            raise AuthorizationFailedError(ErrorCondition.QUES_DELETE_UNAUTHORIZED)
        deleted_id, owner_id = question.id, question.user_id
        questions_repo.delete_question(self.db, question=question)
        if owner_id != user.id:
            logger.info("question_deleted_by_admin id=%s admin=%s", deleted_id, user.id)
        return deleted_id

    def list_by_user(self, user_id: Optional[str]) -> List[models.Question]:
        uid = parse_uuid_maybe(user_id)
        owner = users_repo.get_user(self.db, uid) if uid else None
        if owner is None:
            raise UserNotFoundError(ErrorCondition.QUES_GET_USR_NOT_FOUND)
        return questions_repo.list_questions_by_user(self.db, user_id=owner.id)
