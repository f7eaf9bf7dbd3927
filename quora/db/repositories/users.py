"""
User repository functions.

Implements create/read/delete for users and role updates.
"""
from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from quora.db import models, schemas


def get_user(db: Session, user_id: uuid.UUID) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_user_name(db: Session, user_name: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.user_name == user_name).first()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def create_user(
    db: Session,
    *,
    payload: schemas.SignupUserRequest,
    password_hash: str,
    role: str,
) -> models.User:
    """Insert a user row. IntegrityError from the unique constraints propagates."""
    user = models.User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        user_name=payload.user_name,
        email=payload.email_address,
        password_hash=password_hash,
        country=payload.country,
        about_me=payload.about_me,
        dob=payload.dob,
        contact_number=payload.contact_number,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_password_hash(db: Session, *, user: models.User, password_hash: str) -> None:
    user.password_hash = password_hash
    db.commit()


def set_role(db: Session, *, user: models.User, role: str) -> models.User:
    user.role = role
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, *, user: models.User) -> None:
    # ORM cascades remove auth rows, questions and answers
    db.delete(user)
    db.commit()
