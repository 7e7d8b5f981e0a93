"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from snippetbox.config import get_settings

settings = get_settings()


def create_db_engine(url: str) -> Engine:
    """Create an engine with options suited to the URL's backend.

    SQLite connections are shared across the request worker threads, and
    file databases keep the default pool. Server databases get a bounded
    pool whose connections are pinged before checkout.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


engine = create_db_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Shared by snippetbox.models and the Alembic environment
Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create any missing snippets/users tables (Alembic owns real migrations)."""
    from snippetbox import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
