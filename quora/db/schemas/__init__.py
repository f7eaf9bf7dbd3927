"""
Domain-split Pydantic schemas re-exported under `quora.db.schemas`.
"""

from .common import ErrorResponse
from .users import (
    SignupUserRequest,
    SignupUserResponse,
    SigninResponse,
    SignoutResponse,
    UserDetailsResponse,
    UserDeleteResponse,
)
from .questions import (
    QuestionRequest,
    QuestionEditRequest,
    QuestionResponse,
    QuestionEditResponse,
    QuestionDeleteResponse,
    QuestionDetailsResponse,
)
from .answers import (
    AnswerRequest,
    AnswerEditRequest,
    AnswerResponse,
    AnswerEditResponse,
    AnswerDeleteResponse,
    AnswerDetailsResponse,
)

__all__ = [
    "ErrorResponse",
    # users
    "SignupUserRequest",
    "SignupUserResponse",
    "SigninResponse",
    "SignoutResponse",
    "UserDetailsResponse",
    "UserDeleteResponse",
    # questions
    "QuestionRequest",
    "QuestionEditRequest",
    "QuestionResponse",
    "QuestionEditResponse",
    "QuestionDeleteResponse",
    "QuestionDetailsResponse",
    # answers
    "AnswerRequest",
    "AnswerEditRequest",
    "AnswerResponse",
    "AnswerEditResponse",
    "AnswerDeleteResponse",
    "AnswerDetailsResponse",
]
