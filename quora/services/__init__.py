"""Business logic services package."""

from .user_service import UserService, token_is_active
from .question_service import QuestionService
from .answer_service import AnswerService

__all__ = ["UserService", "QuestionService", "AnswerService", "token_is_active"]
