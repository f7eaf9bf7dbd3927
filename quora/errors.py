"""
Error catalogue and exception hierarchy.

Every business failure is raised as a ``QuoraError`` carrying one
``ErrorCondition``; the API layer renders it as ``{"code", "message"}`` with
the subclass status code.
"""
from __future__ import annotations

from enum import Enum, unique
from typing import Dict

from quora.constants import UserAction


@unique
class ErrorCondition(Enum):
    USERNAME_ALREADY_EXISTS = ("SGR-001", "Try any other Username, this Username has already been taken")
    USER_EMAIL_ALREADY_EXISTS = ("SGR-002", "This user has already been registered, try with any other emailId")

    USERNAME_NOT_FOUND = ("ATH-001", "This username does not exist")
    USER_WRONG_PASSWORD = ("ATH-002", "Password failed")
    MALFORMED_CREDENTIALS = ("ATN-002", "Password failed")

    USER_HAS_SIGNED_OUT = ("SGR-001", "User is not Signed in")

    USER_NOT_SIGNED_IN = ("ATHR-001", "User has not signed in")
    USER_GET_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to get user details")
    USER_NOT_FOUND = ("USR-001", "User with entered uuid does not exist")

    USER_SIGNED_OUT = ("ATHR-002", "User is signed out")
    USER_DELETE_UNAUTHORIZED = ("ATHR-003", "Unauthorized Access, Entered user is not an admin")
    USER_DELETE_USR_NOT_FOUND = ("USR-001", "User with entered uuid to be deleted does not exist")

    QUES_CREATE_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to post a question")
    QUES_GET_ALL_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to get all questions")
    QUES_EDIT_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to edit the question")
    QUES_EDIT_UNAUTHORIZED = ("ATHR-003", "Only the question owner can edit the question")
    QUES_NOT_FOUND = ("QUES-001", "Entered question uuid does not exist")
    QUES_DELETE_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to delete a question")
    QUES_DELETE_UNAUTHORIZED = ("ATHR-003", "Only the question owner or admin can delete the question")
    QUES_GET_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to get all questions posted by a specific user")
    QUES_GET_USR_NOT_FOUND = ("USR-001", "User with entered uuid whose question details are to be seen does not exist")

    ANS_CREATE_QUES_NOT_FOUND = ("QUES-001", "The question entered is invalid")
    ANS_CREATE_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to post an answer")
    ANS_EDIT_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to edit an answer")
    ANS_EDIT_UNAUTHORIZED = ("ATHR-003", "Only the answer owner can edit the answer")
    ANS_NOT_FOUND = ("ANS-001", "Entered answer uuid does not exist")
    ANS_DELETE_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to delete an answer")
    ANS_DELETE_UNAUTHORIZED = ("ATHR-003", "Only the answer owner or admin can delete the answer")
    ANS_GET_AUTH_FAILURE = ("ATHR-002", "User is signed out.Sign in first to get the answers")
    ANS_GET_QUES_NOT_FOUND = ("QUES-001", "The question with entered uuid whose details are to be seen does not exist")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


# Message used when a token exists but is signed out or expired.
SIGNED_OUT_CONDITIONS: Dict[UserAction, ErrorCondition] = {
    UserAction.CREATE_ANSWER: ErrorCondition.ANS_CREATE_AUTH_FAILURE,
    UserAction.EDIT_ANSWER: ErrorCondition.ANS_EDIT_AUTH_FAILURE,
    UserAction.DELETE_ANSWER: ErrorCondition.ANS_DELETE_AUTH_FAILURE,
    UserAction.GET_ALL_ANSWERS: ErrorCondition.ANS_GET_AUTH_FAILURE,
    UserAction.GET_USER_DETAILS: ErrorCondition.USER_GET_AUTH_FAILURE,
    UserAction.DELETE_USER: ErrorCondition.USER_SIGNED_OUT,
    UserAction.CREATE_QUESTION: ErrorCondition.QUES_CREATE_AUTH_FAILURE,
    UserAction.GET_ALL_QUESTIONS: ErrorCondition.QUES_GET_ALL_AUTH_FAILURE,
    UserAction.EDIT_QUESTION: ErrorCondition.QUES_EDIT_AUTH_FAILURE,
    UserAction.DELETE_QUESTION: ErrorCondition.QUES_DELETE_AUTH_FAILURE,
    UserAction.GET_ALL_QUESTIONS_BY_USER: ErrorCondition.QUES_GET_AUTH_FAILURE,
}


def signed_out_condition(action: UserAction) -> ErrorCondition:
    return SIGNED_OUT_CONDITIONS.get(action, ErrorCondition.USER_GET_AUTH_FAILURE)


class QuoraError(Exception):
    """Base class for errors rendered as ``{"code", "message"}`` responses."""

    status_code: int = 500

    def __init__(self, condition: ErrorCondition):
        super().__init__(condition.message)
        self.condition = condition

    @property
    def code(self) -> str:
        return self.condition.code

    @property
    def message(self) -> str:
        return self.condition.message


class AuthorizationFailedError(QuoraError):
    status_code = 403


class AuthenticationFailedError(QuoraError):
    status_code = 401


class SignUpRestrictedError(QuoraError):
    status_code = 401


class SignOutRestrictedError(QuoraError):
    status_code = 401


class UserNotFoundError(QuoraError):
    status_code = 404


class InvalidQuestionError(QuoraError):
    status_code = 404


class AnswerNotFoundError(QuoraError):
    status_code = 404


__all__ = [
    "ErrorCondition",
    "SIGNED_OUT_CONDITIONS",
    "signed_out_condition",
    "QuoraError",
    "AuthorizationFailedError",
    "AuthenticationFailedError",
    "SignUpRestrictedError",
    "SignOutRestrictedError",
    "UserNotFoundError",
    "InvalidQuestionError",
    "AnswerNotFoundError",
]
