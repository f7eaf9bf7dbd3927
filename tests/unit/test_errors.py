from quora.constants import UserAction
from quora.errors import (
    SIGNED_OUT_CONDITIONS,
    AnswerNotFoundError,
    AuthenticationFailedError,
    AuthorizationFailedError,
    ErrorCondition,
    InvalidQuestionError,
    QuoraError,
    SignOutRestrictedError,
    SignUpRestrictedError,
    UserNotFoundError,
    signed_out_condition,
)


def test_condition_exposes_code_and_message():
    cond = ErrorCondition.USER_NOT_SIGNED_IN
    assert cond.code == "ATHR-001"
    assert cond.message == "User has not signed in"


def test_error_status_codes():
    assert AuthorizationFailedError.status_code == 403
    assert AuthenticationFailedError.status_code == 401
    assert SignUpRestrictedError.status_code == 401
    assert SignOutRestrictedError.status_code == 401
    assert UserNotFoundError.status_code == 404
    assert InvalidQuestionError.status_code == 404
    assert AnswerNotFoundError.status_code == 404


def test_error_carries_condition():
    err = InvalidQuestionError(ErrorCondition.QUES_NOT_FOUND)
    assert isinstance(err, QuoraError)
    assert err.code == "QUES-001"
    assert err.message == "Entered question uuid does not exist"
    assert str(err) == err.message


def test_every_action_has_signed_out_message():
    for action in UserAction:
        cond = signed_out_condition(action)
        assert cond.code == "ATHR-002"
    assert set(SIGNED_OUT_CONDITIONS) == set(UserAction)


def test_signed_out_messages_are_action_specific():
    assert signed_out_condition(UserAction.CREATE_QUESTION).message == "User is signed out.Sign in first to post a question"
    assert signed_out_condition(UserAction.DELETE_USER).message == "User is signed out"
    assert signed_out_condition(UserAction.GET_ALL_ANSWERS).message == "User is signed out.Sign in first to get the answers"
