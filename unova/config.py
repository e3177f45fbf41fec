"""Application settings loaded from environment variables."""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Runtime configuration. Keep all credentials and config centralized here."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        gemini_api_key: Optional[str] = None,
        gemini_model: Optional[str] = None,
        gemini_api_base: Optional[str] = None,
        gemini_timeout: Optional[float] = None,
        auth_secret: Optional[str] = None,
        token_expire_days: Optional[int] = None,
        environment: Optional[str] = None,
        frontend_url: Optional[str] = None,
        log_level: Optional[str] = None,
    ):
        database_url = database_url or os.getenv("DATABASE_URL", "sqlite:///./unova.db")
        # Heroku/Neon style URLs are not accepted by SQLAlchemy
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)
        self.database_url: str = database_url

        self.gemini_api_key: Optional[str] = (
            gemini_api_key if gemini_api_key is not None else os.getenv("GEMINI_API_KEY")
        )
        self.gemini_model: str = gemini_model or os.getenv("GEMINI_MODEL", "gemini-pro")
        self.gemini_api_base: str = gemini_api_base or os.getenv(
            "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
        )
        self.gemini_timeout: float = gemini_timeout or float(os.getenv("GEMINI_TIMEOUT", "30"))

        self.auth_secret: str = auth_secret or os.getenv("AUTH_SECRET", "unova-dev-secret-change-me")
        self.token_expire_days: int = token_expire_days or int(os.getenv("TOKEN_EXPIRE_DAYS", "7"))

        self.environment: str = environment or os.getenv("ENVIRONMENT", "development")
        self.frontend_url: str = frontend_url or os.getenv("FRONTEND_URL", "http://localhost:3000")
        self.log_level: str = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
