"""Database package — async SQLAlchemy engine, session factory, Base."""
from widget_table.db.base import (
    Base,
    async_session_factory,
    engine,
    get_db,
    make_engine,
    make_session_factory,
)

__all__ = [
    "Base",
    "async_session_factory",
    "engine",
    "get_db",
    "make_engine",
    "make_session_factory",
]
