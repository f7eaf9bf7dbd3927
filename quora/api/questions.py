"""
Question endpoints.

List endpoints answer 204 with an empty body when there is nothing to show.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from quora.api.deps import get_question_service, require_user
from quora.constants import QuestionStatus, UserAction
from quora.db import models, schemas
from quora.services.question_service import QuestionService

router = APIRouter(prefix="/question", tags=["questions"])


def _as_details(questions) -> List[schemas.QuestionDetailsResponse]:
    return [schemas.QuestionDetailsResponse.model_validate(q) for q in questions]


@router.post("/create", response_model=schemas.QuestionResponse, status_code=status.HTTP_201_CREATED)
def create_question(
    payload: schemas.QuestionRequest,
    current_user: models.User = Depends(require_user(UserAction.CREATE_QUESTION)),
    service: QuestionService = Depends(get_question_service),
):
    question = service.create(current_user, payload.content)
    return schemas.QuestionResponse(id=question.id, status=QuestionStatus.QUESTION_CREATED.value)


@router.get(
    "/all",
    response_model=List[schemas.QuestionDetailsResponse],
    responses={204: {"description": "No questions"}},
)
def get_all_questions(
    _current: models.User = Depends(require_user(UserAction.GET_ALL_QUESTIONS)),
    service: QuestionService = Depends(get_question_service),
):
    questions = service.list_all()
    if not questions:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return _as_details(questions)


@router.put("/edit/{question_id}", response_model=schemas.QuestionEditResponse)
def edit_question_content(
    question_id: str,
    payload: schemas.QuestionEditRequest,
    current_user: models.User = Depends(require_user(UserAction.EDIT_QUESTION)),
    service: QuestionService = Depends(get_question_service),
):
    question = service.edit(current_user, question_id, payload.content)
    return schemas.QuestionEditResponse(id=question.id, status=QuestionStatus.QUESTION_EDITED.value)


@router.delete("/delete/{question_id}", response_model=schemas.QuestionDeleteResponse)
def delete_question(
    question_id: str,
    current_user: models.User = Depends(require_user(UserAction.DELETE_QUESTION)),
    service: QuestionService = Depends(get_question_service),
):
    deleted_id = service.delete(current_user, question_id)
    return schemas.QuestionDeleteResponse(id=deleted_id, status=QuestionStatus.QUESTION_DELETED.value)


@router.get(
    "/all/{user_id}",
    response_model=List[schemas.QuestionDetailsResponse],
    responses={204: {"description": "User has no questions"}},
)
def get_all_questions_by_user(
    user_id: str,
    _current: models.User = Depends(require_user(UserAction.GET_ALL_QUESTIONS_BY_USER)),
    service: QuestionService = Depends(get_question_service),
):
    questions = service.list_by_user(user_id)
    if not questions:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return _as_details(questions)
