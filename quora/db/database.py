"""
Database engine and session management.

The engine URL comes from the environment; test runs fall back to an
in-memory SQLite database. ``get_db`` is the FastAPI dependency handing one
session to each request.
"""
import os
import sys
from typing import Any, Dict, Tuple

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

MEMORY_SQLITE_URL = "sqlite+pysqlite:///:memory:"

_POSTGRES_VARS = ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_HOST", "POSTGRES_PORT", "POSTGRES_DB")


def _get_database_url() -> str:
    """DATABASE_URL wins; otherwise every POSTGRES_* part must be present."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    parts = {name: os.getenv(name) for name in _POSTGRES_VARS}
    missing = [name for name, value in parts.items() if not value]
    if missing:
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")
    return (
        "postgresql://{POSTGRES_USER}:{POSTGRES_PASSWORD}"
        "@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}".format(**parts)
    )


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_RUNNING=1`` forces the answer; otherwise look for the pytest
    package, which is imported from collection on.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    return "PYTEST_CURRENT_TEST" in os.environ or "pytest" in sys.modules


def _resolve_engine_config() -> Tuple[str, Dict[str, Any]]:
    """Pick the engine URL and keyword arguments.

    Order: QUORA_TEST_DB, TEST_DATABASE_URL (e2e, never replaced by SQLite),
    in-memory SQLite under pytest, then the regular environment URL.
    """
    test_db = os.getenv("QUORA_TEST_DB")
    if test_db:
        if test_db.startswith("sqlite"):
            return test_db, {"connect_args": {"check_same_thread": False}}
        return test_db, {}

    e2e_db = os.getenv("TEST_DATABASE_URL")
    if e2e_db:
        return e2e_db, {}

    if _is_pytest_runtime():
        # StaticPool keeps the single in-memory database alive across sessions
        return MEMORY_SQLITE_URL, {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }

    return _get_database_url(), {"pool_pre_ping": True}


DATABASE_URL, _engine_kwargs = _resolve_engine_config()
engine = create_engine(DATABASE_URL, **_engine_kwargs)

# Nothing migrates an in-memory database, so build its schema from the models.
if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    from quora.db import models  # local import keeps models free of engine concerns

    models.Base.metadata.create_all(bind=engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
