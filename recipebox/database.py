"""Database configuration and session management."""

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from recipebox.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def create_store_engine(database_url: str, busy_timeout_ms: int | None = None) -> Engine:
    """Create an engine for the given URL.

    SQLite connections get write-ahead logging, a bounded busy timeout and
    enforced foreign keys, so ON DELETE CASCADE works and concurrent writers
    wait instead of failing immediately.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True, pool_size=5, max_overflow=10)

    if busy_timeout_ms is None:
        busy_timeout_ms = settings.sqlite_busy_timeout_ms

    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    sqlite_engine = create_engine(database_url, connect_args={"check_same_thread": False})

    @event.listens_for(sqlite_engine, "connect")
    def _configure_sqlite(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


engine = create_store_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from recipebox import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database initialized")
