"""Engine construction for SQLite (local dev, tests) and PostgreSQL."""
import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLModel engine for the given URL."""
    if database_url.startswith("sqlite"):
        logger.info(f"[DB CONFIG] Using SQLite database: {database_url}")
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            # Enable foreign keys and WAL mode for better concurrency
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

        return engine

    logger.info("[DB CONFIG] Using PostgreSQL database")
    return create_engine(database_url, echo=echo, pool_pre_ping=True)
