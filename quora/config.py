"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Tuple


DEFAULT_ACCESS_TOKEN_TTL_HOURS = 8

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
)


@dataclass(frozen=True)
class Settings:
    access_token_ttl_hours: int
    admin_usernames: FrozenSet[str]
    cors_allowed_origins: Tuple[str, ...]
    log_level: str


def _normalize_list(value: str | None) -> Tuple[str, ...]:
    """Split a comma separated environment value, dropping blanks and quotes."""
    if not value:
        return ()
    items = []
    for entry in value.split(","):
        cleaned = entry.strip().strip('"').strip("'")
        if cleaned:
            items.append(cleaned)
    return tuple(items)


def _positive_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        raise ValueError(f"Expected an integer, got {value!r}") from None
    if parsed <= 0:
        raise ValueError(f"Expected a positive integer, got {parsed}")
    return parsed


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    origins = _normalize_list(os.getenv("CORS_ALLOWED_ORIGINS")) or DEFAULT_CORS_ORIGINS
    return Settings(
        access_token_ttl_hours=_positive_int(
            os.getenv("ACCESS_TOKEN_TTL_HOURS"), DEFAULT_ACCESS_TOKEN_TTL_HOURS
        ),
        admin_usernames=frozenset(u.lower() for u in _normalize_list(os.getenv("ADMIN_USERNAMES"))),
        cors_allowed_origins=origins,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
