"""
Repository for sign-in sessions (``user_auth`` rows).

Implements token issue, lookup by token id, and sign-out.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from quora.db import models
from quora.utils import token_crypto


def create_auth_token(
    db: Session,
    *,
    user_id: uuid.UUID,
    ttl: timedelta,
    now: Optional[datetime] = None,
) -> Tuple[models.UserAuth, str]:
    """Persist a new session and return it with the one-time full token string."""
    issued_at = now or models.now_utc()
    token_id, secret, full_token = token_crypto.generate_token()
    auth = models.UserAuth(
        user_id=user_id,
        token_id=token_id,
        token_hash=token_crypto.hash_secret(secret),
        login_at=issued_at,
        expires_at=issued_at + ttl,
    )
    db.add(auth)
    db.commit()
    db.refresh(auth)
    return auth, full_token


def get_by_token_id(db: Session, *, token_id: str) -> Optional[models.UserAuth]:
    return (
        db.query(models.UserAuth)
        .filter(models.UserAuth.token_id == token_id)
        .first()
    )


def mark_signed_out(db: Session, *, auth: models.UserAuth, now: Optional[datetime] = None) -> models.UserAuth:
    auth.logout_at = now or models.now_utc()
    db.commit()
    db.refresh(auth)
    return auth
