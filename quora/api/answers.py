"""
Answer endpoints.

Answers are created under ``/question/{question_id}/answer`` and managed
under ``/answer``.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from quora.api.deps import get_answer_service, require_user
from quora.constants import AnswerStatus, UserAction
from quora.db import models, schemas
from quora.services.answer_service import AnswerService

router = APIRouter(tags=["answers"])


@router.post(
    "/question/{question_id}/answer/create",
    response_model=schemas.AnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_answer(
    question_id: str,
    payload: schemas.AnswerRequest,
    current_user: models.User = Depends(require_user(UserAction.CREATE_ANSWER)),
    service: AnswerService = Depends(get_answer_service),
):
    answer = service.create(current_user, question_id, payload.answer)
    return schemas.AnswerResponse(id=answer.id, status=AnswerStatus.ANSWER_CREATED.value)


@router.put("/answer/edit/{answer_id}", response_model=schemas.AnswerEditResponse)
def edit_answer_content(
    answer_id: str,
    payload: schemas.AnswerEditRequest,
    current_user: models.User = Depends(require_user(UserAction.EDIT_ANSWER)),
    service: AnswerService = Depends(get_answer_service),
):
    answer = service.edit(current_user, answer_id, payload.content)
    return schemas.AnswerEditResponse(id=answer.id, status=AnswerStatus.ANSWER_EDITED.value)


@router.delete("/answer/delete/{answer_id}", response_model=schemas.AnswerDeleteResponse)
def delete_answer(
    answer_id: str,
    current_user: models.User = Depends(require_user(UserAction.DELETE_ANSWER)),
    service: AnswerService = Depends(get_answer_service),
):
    deleted_id = service.delete(current_user, answer_id)
    return schemas.AnswerDeleteResponse(id=deleted_id, status=AnswerStatus.ANSWER_DELETED.value)


@router.get("/answer/all/{question_id}", response_model=List[schemas.AnswerDetailsResponse])
def get_all_answers_to_question(
    question_id: str,
    _current: models.User = Depends(require_user(UserAction.GET_ALL_ANSWERS)),
    service: AnswerService = Depends(get_answer_service),
):
    question, answers = service.list_for_question(question_id)
    return [
        schemas.AnswerDetailsResponse(
            id=a.id,
            question_content=question.content,
            answer_content=a.content,
        )
        for a in answers
    ]
