"""Database connection and session management."""

from contextlib import contextmanager
from typing import Generator, Iterator
import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

from vibeswipe.core.config import get_settings
from .base import Base

logger = logging.getLogger(__name__)


def get_engine() -> Engine:
    """Engine for the configured DATABASE_URL; SQLite sessions may cross threads."""
    url = get_settings().DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = get_engine()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create the card, profile, swipe and alert tables if missing."""
    # Models register their tables on import
    import vibeswipe.models  # noqa: F401

    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database schema created successfully")
    except SQLAlchemyError as e:
        logger.error(f"Error creating database schema: {str(e)}")
        raise


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session for FastAPI dependencies."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def db_session(factory=None) -> Iterator[Session]:
    """Session for scripts: commits on success, rolls back and re-raises on error."""
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception as e:
        session.rollback()
        logger.error(f"Database session error: {str(e)}")
        raise
    finally:
        session.close()
