"""
Answer repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from quora.db import models


def create_answer(
    db: Session,
    *,
    user_id: uuid.UUID,
    question_id: uuid.UUID,
    content: str,
) -> models.Answer:
    answer = models.Answer(user_id=user_id, question_id=question_id, content=content)
    db.add(answer)
    db.commit()
    db.refresh(answer)
    return answer


def get_answer(db: Session, answer_id: uuid.UUID) -> Optional[models.Answer]:
    return db.query(models.Answer).filter(models.Answer.id == answer_id).first()


def list_answers_for_question(db: Session, *, question_id: uuid.UUID) -> List[models.Answer]:
    return (
        db.query(models.Answer)
        .filter(models.Answer.question_id == question_id)
        .order_by(models.Answer.created_at.asc())
        .all()
    )


def update_answer_content(db: Session, *, answer: models.Answer, content: str) -> models.Answer:
    answer.content = content
    db.commit()
    db.refresh(answer)
    return answer


def delete_answer(db: Session, *, answer: models.Answer) -> None:
    db.delete(answer)
    db.commit()
