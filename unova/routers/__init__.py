"""Routers package for the UNova API."""

from .auth import router as auth_router, profile_router
from .chat import router as chat_router
from .research_notes import router as research_notes_router
from .resolutions import router as resolutions_router
from .speeches import router as speeches_router

__all__ = [
    "auth_router",
    "profile_router",
    "chat_router",
    "research_notes_router",
    "resolutions_router",
    "speeches_router",
]
