"""
Access token helpers.

An access token looks like ``qa_at_<token_id>_<secret>``. ``token_id`` is a
uuid4 hex string used to find the ``user_auth`` row; only an Argon2id hash
of ``secret`` is stored, so a leaked table cannot be replayed.
"""
from __future__ import annotations

import secrets
import uuid
from typing import NamedTuple, Optional, Tuple

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

TOKEN_PREFIX = "qa_at_"
SECRET_BYTES = 32

_hasher = PasswordHasher()


class ParsedToken(NamedTuple):
    token_id: str
    secret: str


def generate_token() -> Tuple[str, str, str]:
    """Return ``(token_id, secret, full_token)`` for a brand new session."""
    token_id = uuid.uuid4().hex
    secret = secrets.token_urlsafe(SECRET_BYTES)
    return token_id, secret, f"{TOKEN_PREFIX}{token_id}_{secret}"


def parse_token(token: Optional[str]) -> Optional[ParsedToken]:
    """Split a full token into its id and secret, or None when malformed."""
    if not token or not token.startswith(TOKEN_PREFIX):
        return None
    # The secret is urlsafe base64 and may contain '_' itself
    token_id, sep, secret = token[len(TOKEN_PREFIX):].partition("_")
    if not sep or not token_id or not secret:
        return None
    return ParsedToken(token_id, secret)


def hash_secret(secret: str) -> str:
    return _hasher.hash(secret)


def verify_secret(secret: str, encoded_hash: str) -> bool:
    if not (secret and encoded_hash):
        return False
    try:
        return _hasher.verify(encoded_hash, secret)
    except (VerificationError, InvalidHashError):
        return False


def extract_bearer(authorization: Optional[str]) -> Optional[str]:
    """Return the credential carried by an ``authorization`` header value.

    ``Bearer <token>`` yields the token; any other value is used as-is.
    """
    if authorization is None:
        return None
    _, bearer, token = authorization.partition("Bearer ")
    value = token if bearer else authorization
    return value.strip() or None
