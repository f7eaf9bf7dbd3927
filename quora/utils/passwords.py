"""Password hashing for user credentials (Argon2id via argon2-cffi)."""
from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, encoded_hash: str) -> bool:
    """Return True when ``password`` matches ``encoded_hash``; never raises on mismatch."""
    if not password or not encoded_hash:
        return False
    try:
        return _hasher.verify(encoded_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def needs_rehash(encoded_hash: str) -> bool:
    """True when the stored hash was produced with outdated parameters."""
    return _hasher.check_needs_rehash(encoded_hash)
