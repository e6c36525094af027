"""Database package."""

from app.db.session import (
    AsyncSessionLocal,
    Base,
    SessionLocal,
    async_engine,
    get_db_dependency,
    get_sync_db,
    init_db,
    sync_engine,
)

__all__ = [
    "AsyncSessionLocal",
    "Base",
    "SessionLocal",
    "async_engine",
    "get_db_dependency",
    "get_sync_db",
    "init_db",
    "sync_engine",
]
