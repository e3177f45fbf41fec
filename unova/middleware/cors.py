"""CORS configuration for the web client."""
import logging

from fastapi.middleware.cors import CORSMiddleware

from unova.config import Settings

logger = logging.getLogger(__name__)

# Base allowed origins for development
DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]


def add_cors_middleware(app, settings: Settings):
    """Add CORS middleware to the FastAPI application."""
    if settings.environment == "production":
        origins = [settings.frontend_url]
    else:
        origins = list(DEV_ORIGINS)
        if settings.frontend_url and settings.frontend_url not in origins:
            origins.append(settings.frontend_url)

    logger.info(f"[CORS] Environment: {settings.environment}, allowed origins: {origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
