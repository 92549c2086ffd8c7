"""Database engine, session management and schema creation."""

import logging
from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from skillsnap.core.config import settings

logger = logging.getLogger(__name__)


def make_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for url.

    SQLite connections may be used from FastAPI's threadpool, so thread checks
    are disabled; an in-memory SQLite database is pinned to one connection so
    every session sees the same tables.
    """
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)
    return create_engine(url, pool_pre_ping=True, echo=echo)


engine = make_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None, reset: bool = False) -> None:
    """Create all tables if missing. With reset=True, drop them first."""
    # Import models so Base.metadata contains every table.
    from skillsnap.models import Base

    bind = bind or engine
    if reset:
        logger.warning("Dropping all tables before schema creation (DB_RESET_ON_STARTUP).")
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready: %s", ", ".join(sorted(Base.metadata.tables)))
