"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from eventreg.api.submit import router as submit_router
from eventreg.config import settings
from eventreg.database import create_tables, dispose_engine

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer() if settings.environment == "development"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("app_starting", environment=settings.environment)
    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("database_tables_created")
    yield
    await dispose_engine()
    logger.info("app_shutting_down")


app = FastAPI(
    title="Event Registration API",
    description="Event registration intake with one-time SMS confirmation",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(submit_router)


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors with the usual ``{error}`` shape."""
    logger.warning("request_invalid", path=request.url.path, errors=exc.errors())
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Event Registration API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health():
    return {"status": "ok"}
