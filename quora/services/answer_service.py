"""
Answer service: answers hang off an existing question and follow the same
owner/admin rules as questions.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from quora.services.permissions import can_delete, can_edit
from quora.db import models
from quora.db.repositories import answers as answers_repo
from quora.errors import AnswerNotFoundError, AuthorizationFailedError, ErrorCondition
from quora.services.question_service import QuestionService
from quora.services.user_service import parse_uuid_maybe

logger = logging.getLogger(__name__)


class AnswerService:
    def __init__(self, db: Session):
        self.db = db
        self.questions = QuestionService(db)

    def create(self, user: models.User, question_id: Optional[str], content: str) -> models.Answer:
        question = self.questions.get(question_id, not_found=ErrorCondition.ANS_CREATE_QUES_NOT_FOUND)
        answer = answers_repo.create_answer(
            self.db, user_id=user.id, question_id=question.id, content=content
        )
        logger.debug("answer_created id=%s question_id=%s user_id=%s", answer.id, question.id, user.id)
        return answer

    def get(self, answer_id: Optional[str]) -> models.Answer:
        aid = parse_uuid_maybe(answer_id)
        answer = answers_repo.get_answer(self.db, aid) if aid else None
        if answer is None:
            raise AnswerNotFoundError(ErrorCondition.ANS_NOT_FOUND)
        return answer

    def edit(self, user: models.User, answer_id: Optional[str], content: str) -> models.Answer:
        answer = self.get(answer_id)
        if not can_edit(answer, user):
            raise AuthorizationFailedError(ErrorCondition.ANS_EDIT_UNAUTHORIZED)
        return answers_repo.update_answer_content(self.db, answer=answer, content=content)

    def delete(self, user: models.User, answer_id: Optional[str]):
        answer = self.get(answer_id)
        if not can_delete(answer, user):
            raise AuthorizationFailedError(ErrorCondition.ANS_DELETE_UNAUTHORIZED)
        deleted_id, owner_id = answer.id, answer.user_id
        answers_repo.delete_answer(self.db, answer=answer)
        if owner_id != user.id:
            logger.info("answer_deleted_by_admin id=%s admin=%s", deleted_id, user.id)
        return deleted_id

    def list_for_question(self, question_id: Optional[str]) -> Tuple[models.Question, List[models.Answer]]:
        question = self.questions.get(question_id, not_found=ErrorCondition.ANS_GET_QUES_NOT_FOUND)
        return question, answers_repo.list_answers_for_question(self.db, question_id=question.id)
