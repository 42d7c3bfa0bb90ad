"""FastAPI application for the ZIBA support engine."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .... import __version__
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain.exceptions import ZibraError
from ...common.exception_handler import (
    format_exception_json,
    get_http_status_code,
    log_exception,
)
from .deps import get_help_search, get_template_selector
from .routers import health, help_center, support

setup_logging(level=settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

DEBUG_MODE = settings.debug

app = FastAPI(
    title="ZIBA Support API",
    description=(
        "Support assistant response selection and help center search for the ZIBA "
        "rider, driver and admin apps."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5000",  # Local app server
        "http://localhost:5173",  # Vite dev server
        "capacitor://localhost",  # Mobile shell
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(support.router)
app.include_router(help_center.router)


# =============================================================================
# Global Exception Handlers
# =============================================================================


@app.exception_handler(ZibraError)
async def zibra_error_handler(request: Request, exc: ZibraError) -> JSONResponse:
    """Handle all ZibraError exceptions with structured JSON response."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=exc.to_dict(include_trace=DEBUG_MODE),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions with structured JSON response."""
    log_exception(exc, extra_context={"path": str(request.url.path), "method": request.method})

    return JSONResponse(
        status_code=get_http_status_code(exc),
        content=format_exception_json(exc, include_trace=DEBUG_MODE),
    )


# =============================================================================
# Lifecycle Events
# =============================================================================


@app.on_event("startup")
async def startup_event():
    """Load the corpus eagerly so a broken corpus fails at startup."""
    logger.info("ZIBA Support API starting up...")
    try:
        get_template_selector()
        get_help_search()
    except ZibraError as exc:
        log_exception(exc, extra_context={"phase": "startup"})
        raise
    logger.info("Debug mode: %s", "ENABLED" if DEBUG_MODE else "DISABLED")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("ZIBA Support API shutting down...")


__all__ = ["app"]
