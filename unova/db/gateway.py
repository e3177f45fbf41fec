"""
Persistence Gateway

Owns the engine for the lifetime of the process. The application opens it at
startup, stores it on ``app.state.gateway`` and closes it at shutdown; request
handlers receive sessions from it through the ``get_session`` dependency.
"""
import logging
from contextlib import contextmanager
from typing import Generator, Iterator, Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session

from unova import models  # noqa: F401  registers tables on SQLModel.metadata
from unova.db.config import build_engine

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """Explicitly constructed handle on the relational store."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("PersistenceGateway is not open")
        return self._engine

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "PersistenceGateway":
        """Create the engine and any missing tables."""
        if self._engine is not None:
            return self
        self._engine = build_engine(self.database_url, echo=self.echo)
        logger.info("[DB INIT] Creating all tables...")
        SQLModel.metadata.create_all(self._engine)
        logger.info("[DB INIT] Tables created successfully.")
        return self

    def close(self) -> None:
        """Dispose of pooled connections. Safe to call twice."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Persistence gateway closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a session bound to the gateway's engine."""
        with Session(self.engine, expire_on_commit=False) as session:
            yield session


def get_gateway(request: Request) -> PersistenceGateway:
    """Dependency returning the gateway opened at application startup."""
    return request.app.state.gateway


def get_session(request: Request) -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with get_gateway(request).session() as session:
        yield session
