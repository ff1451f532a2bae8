"""Database package initialization."""

from .base import Base
from .connection import get_db, init_db, db_session, SessionLocal, engine
from .types import UTCDateTime

__all__ = [
    'Base',
    'get_db',
    'init_db',
    'db_session',
    'SessionLocal',
    'engine',
    'UTCDateTime'
]
