"""
Question repository functions.
"""
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy.orm import Session

from quora.db import models


def create_question(db: Session, *, user_id: uuid.UUID, content: str) -> models.Question:
    question = models.Question(user_id=user_id, content=content)
    db.add(question)
    db.commit()
    db.refresh(question)
    return question


def get_question(db: Session, question_id: uuid.UUID) -> Optional[models.Question]:
    return db.query(models.Question).filter(models.Question.id == question_id).first()


def list_questions(db: Session) -> List[models.Question]:
    return db.query(models.Question).order_by(models.Question.created_at.asc()).all()


def list_questions_by_user(db: Session, *, user_id: uuid.UUID) -> List[models.Question]:
    return (
        db.query(models.Question)
        .filter(models.Question.user_id == user_id)
        .order_by(models.Question.created_at.asc())
        .all()
    )


def update_question_content(db: Session, *, question: models.Question, content: str) -> models.Question:
    question.content = content
    db.commit()
    db.refresh(question)
    return question


def delete_question(db: Session, *, question: models.Question) -> None:
    db.delete(question)
    db.commit()
