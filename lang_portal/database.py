"""Database configuration and session management."""

from collections.abc import Generator
from pathlib import Path
from typing import Annotated, Any

import structlog
from fastapi import Depends, Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lang_portal.config import Settings

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, _connection_record: Any) -> None:  # noqa: ANN401
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """
    Handle on the relational store.

    Owns the engine and the session factory. Built once by the application
    lifespan and disposed on shutdown.
    """

    def __init__(self, settings: Settings) -> None:
        url = make_url(settings.DATABASE_URL)

        if url.get_backend_name() == "sqlite":
            if url.database in (None, "", ":memory:"):
                # An in-memory store lives inside its one connection
                self.engine = create_engine(
                    settings.DATABASE_URL,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            else:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
                self.engine = create_engine(
                    settings.DATABASE_URL,
                    connect_args={"check_same_thread": False},
                )
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_engine(
                settings.DATABASE_URL,
                pool_size=20,
                max_overflow=30,
                pool_pre_ping=True,  # Verify connections before use
                pool_recycle=3600,  # Recycle connections after 1 hour
            )

        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info("database_initialized", backend=url.get_backend_name())

    def create_tables(self) -> None:
        """Create all tables that do not exist yet."""
        # Models must be imported so their tables are registered on the metadata
        from lang_portal import models  # noqa: F401, PLC0415

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        """Open a new session bound to the engine."""
        return self.session_factory()

    def dispose(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()
        logger.info("database_disposed")


def get_database(request: Request) -> Database:
    """Get the store handle attached to the running application."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized. The application lifespan did not run.")
    return database


def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> Generator[Session, None, None]:
    """Get database session."""
    db = database.session()
    try:
        yield db
    finally:
        db.close()


# Type alias for database dependency
DatabaseSession = Annotated[Session, Depends(get_db)]
