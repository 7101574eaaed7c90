import logging
import os
from time import time

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from starlette.requests import Request

from backend.app.api.errors import register_exception_handlers
from backend.app.api.routes.emails import router as emails_router
from backend.app.api.routes.people import admins_router, users_router
from backend.app.api.routes.posts import router as posts_router
from backend.app.core.config import settings
from backend.app.core.logging import configure_logging
from backend.app.db.init_db import init_db as create_tables

configure_logging(settings.log_level, sql_echo=settings.sql_echo)

logger = logging.getLogger(__name__)

_SLOW_REQUEST_SECONDS = 2.0

app = FastAPI(title="Blog Backend", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _init_sentry() -> None:
    dsn = (os.getenv("SENTRY_DSN") or "").strip()
    if not dsn:
        return

    try:
        traces_sample_rate = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.1"))
    except ValueError:
        traces_sample_rate = 0.1

    sentry_sdk.init(
        dsn=dsn,
        environment=os.getenv("SENTRY_ENVIRONMENT", settings.app_env),
        release=os.getenv("SENTRY_RELEASE") or "unknown",
        traces_sample_rate=traces_sample_rate,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
    )


_init_sentry()


@app.middleware("http")
async def request_context(request: Request, call_next):
    scope = sentry_sdk.get_current_scope()
    scope.set_tag("method", request.method)
    scope.set_tag("path", request.url.path)

    started = time()
    try:
        return await call_next(request)
    finally:
        duration = time() - started
        if duration > _SLOW_REQUEST_SECONDS:
            logger.warning("Slow request: %s %s %.3fs", request.method, request.url.path, duration)
        else:
            logger.debug("Request: %s %s %.3fs", request.method, request.url.path, duration)


register_exception_handlers(app)
app.include_router(posts_router)
app.include_router(users_router)
app.include_router(admins_router)
app.include_router(emails_router)


@app.on_event("startup")
def init_db() -> None:
    # Ensure core tables exist (useful for fresh databases without migrations).
    create_tables()


@app.get("/health")
def healthcheck():
    return {"status": "ok", "env": settings.app_env}
