"""Main FastAPI application for the UNova MUN assistant."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from unova import __version__
from unova.config import Settings, get_settings
from unova.db import PersistenceGateway
from unova.errors import UNovaError
from unova.middleware.cors import add_cors_middleware
from unova.routers import (
    auth_router,
    chat_router,
    profile_router,
    research_notes_router,
    resolutions_router,
    speeches_router,
)
from unova.services.completion_client import CompletionClient

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


def add_exception_handlers(app: FastAPI) -> None:
    """Every error leaves as ``{"message": ...}``; tracebacks stay in the log."""

    @app.exception_handler(UNovaError)
    async def unova_error_handler(request: Request, exc: UNovaError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": _first_validation_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; defaults to the environment
        completion_client: Pre-built client (tests pass one with a stub transport)
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _configure_logging(settings.log_level)
        gateway = PersistenceGateway(settings.database_url).open()
        client = completion_client or CompletionClient(settings)
        app.state.gateway = gateway
        app.state.completion_client = client
        logger.info("Application startup complete.")
        try:
            yield
        finally:
            await client.aclose()
            gateway.close()

    app = FastAPI(
        title="UNova API",
        description="AI assistant and document store for Model UN delegates",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    add_cors_middleware(app, settings)
    add_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/")
    async def root():
        """Root endpoint - API welcome message."""
        return {
            "message": "Welcome to the UNova API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    app.include_router(auth_router, prefix="/auth")  # /auth/sign-up, /auth/sign-in
    app.include_router(profile_router, prefix="/api")  # /api/user
    app.include_router(chat_router, prefix="/api")  # /api/chat, /api/conversations
    app.include_router(speeches_router, prefix="/api")
    app.include_router(resolutions_router, prefix="/api")
    app.include_router(research_notes_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "unova.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
