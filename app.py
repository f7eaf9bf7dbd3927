"""
App entry point.

Re-exports the FastAPI `app` from `quora.api.main` so servers can be started
with ``uvicorn app:app``.
"""

from quora.api.main import app  # noqa: F401
