"""
Status strings returned by mutating endpoints and the actions for which a
current user is resolved.
"""
from enum import Enum


class UserStatus(str, Enum):
    USER_REGISTERED = "USER SUCCESSFULLY REGISTERED"
    SIGNIN_SUCCESSFUL = "SIGNED IN SUCCESSFULLY"
    SIGNOUT_SUCCESSFUL = "SIGNED OUT SUCCESSFULLY"
    USER_DELETED = "USER SUCCESSFULLY DELETED"


class QuestionStatus(str, Enum):
    QUESTION_CREATED = "QUESTION CREATED"
    QUESTION_EDITED = "QUESTION EDITED"
    QUESTION_DELETED = "QUESTION DELETED"


class AnswerStatus(str, Enum):
    ANSWER_CREATED = "ANSWER CREATED"
    ANSWER_EDITED = "ANSWER EDITED"
    ANSWER_DELETED = "ANSWER DELETED"


class UserAction(str, Enum):
    """Operation on whose behalf the bearer token is being checked.

    Only affects the message returned when the token is signed out or expired.
    """
    CREATE_ANSWER = "create_answer"
    EDIT_ANSWER = "edit_answer"
    DELETE_ANSWER = "delete_answer"
    GET_ALL_ANSWERS = "get_all_answers"
    GET_USER_DETAILS = "get_user_details"
    DELETE_USER = "delete_user"
    CREATE_QUESTION = "create_question"
    GET_ALL_QUESTIONS = "get_all_questions"
    EDIT_QUESTION = "edit_question"
    DELETE_QUESTION = "delete_question"
    GET_ALL_QUESTIONS_BY_USER = "get_all_questions_by_user"
