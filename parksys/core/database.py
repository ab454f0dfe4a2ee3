"""PostgreSQL connection pool and per-request session management."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import TYPE_CHECKING, Any

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

if TYPE_CHECKING:
    from parksys.core.config import Settings

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the process-wide connection pool (one SQLAlchemy Engine) and the
    session factory bound to it.

    Created once at application startup and disposed at shutdown; handlers
    receive sessions through get_db, never the engine itself.
    """

    def __init__(self, url: str, **engine_options: Any) -> None:
        engine_options.setdefault("pool_pre_ping", True)
        self.engine: Engine = create_engine(url, **engine_options)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        """Build the pool from DATABASE_URL and the DB_POOL_* settings."""
        return cls(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT_SEC,
            echo=settings.DEBUG,
        )

    def session(self) -> Session:
        return self.session_factory()

    def ping(self) -> bool:
        """Check out a connection and run a trivial query."""
        session = self.session()
        try:
            return check_db_connected(session)
        finally:
            session.close()

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()
        logger.info("Database connection pool disposed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session from the app's pool and closes it when done."""
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.warning("Database connectivity check failed", exc_info=True)
        return False
