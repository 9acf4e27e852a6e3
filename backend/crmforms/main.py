"""CRM Forms: server-side validation for the jewelry CRM dashboard forms.

Main FastAPI application with lifespan logging, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crmforms import __version__
from crmforms.config import get_settings
from crmforms.api.router import api_router
from crmforms.validators import form_validation_engine


def configure_logging(debug: bool, log_level: str) -> None:
    """Configure structured logging for the whole process."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
    )


configure_logging(get_settings().DEBUG, get_settings().LOG_LEVEL)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    logger.info(
        "app_started",
        debug=settings.DEBUG,
        forms=form_validation_engine.form_names(),
        max_upload_size_mb=settings.MAX_UPLOAD_SIZE_MB,
    )

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="CRM Forms",
    description=(
        "Form validation service for the jewelry CRM dashboard. "
        "Runs the same field rules the browser runs, so submissions "
        "can be re-checked on the server."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle malformed input that slipped past request validation."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint: API info."""
    return {
        "name": "CRM Forms",
        "version": __version__,
        "description": "Form validation service for the jewelry CRM dashboard",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "crmforms.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        reload=settings.DEBUG,
    )
