"""Main FastAPI application module for NoteCal Bridge.

This module initializes the FastAPI application and sets up the event routes.
"""

import logging
import logging.config
from contextlib import asynccontextmanager
from typing import Any, Dict, List

import uvicorn
from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from notecal.core.config import Settings, get_settings
from notecal.core.logging_config import build_logging_config
from notecal.api.routers import events as events_router

_startup_settings = get_settings()
logging.config.dictConfig(build_logging_config(_startup_settings.log_level))
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting NoteCal Bridge API...")
    try:
        settings = get_settings()
        logger.info(f"Settings loaded (environment: {settings.environment}).")
    except Exception as e:
        logger.error(f"Failed to load settings on startup: {e}", exc_info=True)
        raise

    yield

    # Shutdown
    logger.info("Shutting down NoteCal Bridge API...")

app = FastAPI(
    title="NoteCal Bridge API",
    description="Creates, updates and deletes calendar events from note app date notation.",
    version="0.1.0",
    lifespan=lifespan
)

# CORS is only needed when the note app talks to a local development server
if _startup_settings.environment == "development":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_startup_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

def format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Formats validation errors as '- location: message [type]' lines."""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        path = ".".join(loc) if loc else "root"
        formatted.append(f"- {path}: {error.get('msg')} [{error.get('type')}]")
    return formatted

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Reports request validation failures as 400 plain text."""
    title = f"[{request.method} {request.url.path}] validation failed"
    errors = format_validation_errors(exc.errors())
    logger.error(f"{title}: url={request.url} params={request.path_params} query={dict(request.query_params)} errors={errors}")
    return PlainTextResponse(
        f"{title}:\n" + "\n".join(errors),
        status_code=status.HTTP_400_BAD_REQUEST,
    )

app.include_router(events_router.router, prefix="/events", tags=["Events"])

@app.get("/health", response_model=Dict[str, Any])
async def health_check(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    """Health check endpoint to verify the API is running.

    Returns:
        Dict[str, Any]: Health status information
    """
    return {
        "status": "healthy",
        "version": app.version,
        "environment": settings.environment,
    }

@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Hello"

if __name__ == "__main__":
    settings = get_settings()

    logger.info(f"Starting Uvicorn server on {settings.api_host}:{settings.api_port} with reload={settings.api_reload}")

    uvicorn.run(
        "notecal.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_config=build_logging_config(settings.log_level),
        log_level=settings.api_log_level.lower()
    )
