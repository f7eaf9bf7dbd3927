"""
User service: sign-up, sign-in/sign-out, current-user resolution from access
tokens, profile lookup and admin deletion.
"""

import base64
import binascii
import logging
import uuid
from datetime import datetime, timedelta
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quora.config import get_settings
from quora.constants import UserAction
from quora.db import models, schemas
from quora.db.repositories import auth_tokens as auth_repo
from quora.db.repositories import users as users_repo
from quora.errors import (
    AuthenticationFailedError,
    AuthorizationFailedError,
    ErrorCondition,
    SignOutRestrictedError,
    SignUpRestrictedError,
    UserNotFoundError,
    signed_out_condition,
)
from quora.utils import passwords, token_crypto
from quora.utils.role_permissions import ROLE_ADMIN, ROLE_NONADMIN, role_allows

logger = logging.getLogger("quora.auth")
admin_logger = logging.getLogger("quora.admin")


def token_is_active(auth: models.UserAuth, now: Optional[datetime] = None) -> bool:
    """A session is usable until it is signed out or reaches its expiry."""
    current = models.as_utc(now or models.now_utc())
    logout_at = models.as_utc(auth.logout_at)
    if logout_at is not None and logout_at <= current:
        return False
    return models.as_utc(auth.expires_at) > current


def decode_basic_credentials(authorization: Optional[str]) -> Tuple[str, str]:
    """Split a ``Basic base64(user:password)`` header into its two parts."""
    raw = authorization or ""
    key = raw.split("Basic ", 1)[1] if "Basic " in raw else raw
    try:
        decoded = base64.b64decode(key.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise AuthenticationFailedError(ErrorCondition.MALFORMED_CREDENTIALS) from None
    user_name, sep, password = decoded.partition(":")
    if not sep or not password:
        raise AuthenticationFailedError(ErrorCondition.MALFORMED_CREDENTIALS)
    return user_name, password


def parse_uuid_maybe(value: Optional[str]) -> Optional[uuid.UUID]:
    if not value:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class UserService:
    """Service class for user and session operations."""

    def __init__(self, db: Session):
        self.db = db

    # Sessions

    def _find_session(self, access_token: Optional[str]) -> Optional[models.UserAuth]:
        parsed = token_crypto.parse_token(access_token)
        if not parsed:
            return None
        auth = auth_repo.get_by_token_id(self.db, token_id=parsed.token_id)
        if not auth or not token_crypto.verify_secret(parsed.secret, auth.token_hash):
            return None
        return auth

    def get_current_user(self, access_token: Optional[str], action: UserAction) -> models.User:
        """Return the user owning ``access_token``.

        Raises AuthorizationFailedError when the token is unknown (ATHR-001) or
        is signed out/expired (ATHR-002 with a message specific to ``action``).
        """
        auth = self._find_session(access_token)
        if auth is None:
            raise AuthorizationFailedError(ErrorCondition.USER_NOT_SIGNED_IN)
        if not token_is_active(auth):
            raise AuthorizationFailedError(signed_out_condition(action))
        return auth.user

    def authenticate(self, authorization: Optional[str]) -> Tuple[models.User, models.UserAuth, str]:
        """Validate Basic credentials and issue a new access token."""
        user_name, password = decode_basic_credentials(authorization)
        user = users_repo.get_user_by_user_name(self.db, user_name)
        if user is None:
            logger.info("signin_failed reason=unknown_user")
            raise AuthenticationFailedError(ErrorCondition.USERNAME_NOT_FOUND)
        if not passwords.verify_password(password, user.password_hash):
            logger.info("signin_failed reason=wrong_password user_id=%s", user.id)
            raise AuthenticationFailedError(ErrorCondition.USER_WRONG_PASSWORD)
        if passwords.needs_rehash(user.password_hash):
            users_repo.update_password_hash(self.db, user=user, password_hash=passwords.hash_password(password))

        ttl = timedelta(hours=get_settings().access_token_ttl_hours)
        auth, full_token = auth_repo.create_auth_token(self.db, user_id=user.id, ttl=ttl)
        logger.info("signin user_id=%s expires_at=%s", user.id, models.as_utc(auth.expires_at).isoformat())
        return user, auth, full_token

    def sign_out(self, access_token: Optional[str]) -> models.User:
        auth = self._find_session(access_token)
        if auth is None or not token_is_active(auth):
            raise SignOutRestrictedError(ErrorCondition.USER_HAS_SIGNED_OUT)
        auth_repo.mark_signed_out(self.db, auth=auth)
        logger.info("signout user_id=%s", auth.user_id)
        return auth.user

    # Users

    def register(self, payload: schemas.SignupUserRequest) -> models.User:
        if users_repo.get_user_by_user_name(self.db, payload.user_name):
            raise SignUpRestrictedError(ErrorCondition.USERNAME_ALREADY_EXISTS)
        if users_repo.get_user_by_email(self.db, payload.email_address):
            raise SignUpRestrictedError(ErrorCondition.USER_EMAIL_ALREADY_EXISTS)

        role = ROLE_ADMIN if payload.user_name.lower() in get_settings().admin_usernames else ROLE_NONADMIN
        try:
            user = users_repo.create_user(
                self.db,
                payload=payload,
                password_hash=passwords.hash_password(payload.password),
                role=role,
            )
        except IntegrityError as exc:
            # A concurrent sign-up won the race; report which constraint fired
            self.db.rollback()
            if "user_name" in str(exc.orig).lower():
                raise SignUpRestrictedError(ErrorCondition.USERNAME_ALREADY_EXISTS) from None
            raise SignUpRestrictedError(ErrorCondition.USER_EMAIL_ALREADY_EXISTS) from None
        logger.info("signup user_id=%s role=%s", user.id, user.role)
        return user

    def get_user(self, user_id: Optional[str], *, not_found: ErrorCondition = ErrorCondition.USER_NOT_FOUND) -> models.User:
        uid = parse_uuid_maybe(user_id)
        user = users_repo.get_user(self.db, uid) if uid else None
        if user is None:
            raise UserNotFoundError(not_found)
        return user

    def delete_user(self, caller: models.User, user_id: Optional[str]) -> uuid.UUID:
        """Delete ``user_id`` on behalf of ``caller``, who must be an admin."""
        if not role_allows(caller.role, "can_delete_users"):
            admin_logger.warning("delete_user denied caller=%s target=%s", caller.id, user_id)
            raise AuthorizationFailedError(ErrorCondition.USER_DELETE_UNAUTHORIZED)
        target = self.get_user(user_id, not_found=ErrorCondition.USER_DELETE_USR_NOT_FOUND)
        caller_id, target_id = caller.id, target.id
        users_repo.delete_user(self.db, user=target)
        admin_logger.info("delete_user caller=%s target=%s", caller_id, target_id)
        return target_id
