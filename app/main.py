"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events and router
registration for the career map intake API.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from app.core.config import settings
from app.core.constants import (
    DEFAULT_VALIDATION_MESSAGE,
    FORM_SUBTITLE,
    FORM_TITLE,
    MESSAGE_VALIDATION_FAILED,
)
from app.core.logging import setup_logging
from app.routers import career_map, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks."""
    setup_logging()
    logger.info("Application starting up")
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title=f"{FORM_TITLE} Career Map API",
    description=FORM_SUBTITLE,
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(career_map.router, prefix="/api/v1/career-map", tags=["Career Map"])


# ---------------------------------------------------------------------------
# Error Bodies
# ---------------------------------------------------------------------------
@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return unparseable or non-object bodies in the form's error shape."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.setdefault(".".join(loc) or "body", DEFAULT_VALIDATION_MESSAGE)

    logger.info(
        "request_body_rejected",
        extra={"path": request.url.path, "fields": sorted(errors)},
    )
    return JSONResponse(
        status_code=422,
        content={"message": MESSAGE_VALIDATION_FAILED, "errors": errors},
    )
