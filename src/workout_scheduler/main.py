"""FastAPI application for the Workout Scheduler."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.deps import get_calendar_provider
from .api.exception_handlers import register_exception_handlers
from .api.routes import activities, preferences, progress, suggestions
from .config import get_settings
from .utils.log_sanitizer import configure_logging

logger = logging.getLogger(__name__)

USER_PREFIX = "/api/v1/users/{user_id}"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting Workout Scheduler v%s", __version__)
    yield
    await get_calendar_provider().close()
    logger.info("Shutting down Workout Scheduler")


app = FastAPI(
    title="Workout Scheduler API",
    description="Ranked, explainable workout slot suggestions",
    version=__version__,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(preferences.router, prefix=f"{USER_PREFIX}/preferences", tags=["preferences"])
app.include_router(activities.router, prefix=f"{USER_PREFIX}/activities", tags=["activities"])
app.include_router(suggestions.router, prefix=f"{USER_PREFIX}/suggestions", tags=["suggestions"])
app.include_router(progress.router, prefix=f"{USER_PREFIX}/stats", tags=["progress"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Workout Scheduler API",
        "version": __version__,
        "status": "healthy",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
