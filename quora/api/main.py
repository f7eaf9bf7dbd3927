"""
FastAPI app assembly: logging, middleware, error rendering and router wiring.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from quora.config import get_settings
from quora.db.schemas import ErrorResponse
from quora.errors import QuoraError

# Configure logging
settings = get_settings()
LOG_LEVEL_NAME = settings.log_level
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)


from quora.api.admin import router as admin_router
from quora.api.answers import router as answers_router
from quora.api.common import router as common_router
from quora.api.questions import router as questions_router
from quora.api.users import router as users_router
from quora.api.users import ACCESS_TOKEN_HEADER

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Quora Q&A Service",
    description="API for users, questions and answers with token based sign-in.",
    version="1.0.0",
    redirect_slashes=False,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[ACCESS_TOKEN_HEADER],
)


@app.exception_handler(QuoraError)
async def quora_error_handler(request: Request, exc: QuoraError):
    logger.debug("request_failed path=%s code=%s", request.url.path, exc.code)
    return JSONResponse(
        {"code": exc.code, "message": exc.message},
        status_code=exc.status_code,
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}


# Every business failure renders as ErrorResponse
ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (401, 403, 404)}

for router in (users_router, common_router, admin_router, questions_router, answers_router):
    app.include_router(router, responses=ERROR_RESPONSES)
