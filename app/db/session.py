"""Database session management."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.core.config import settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def _to_async_url(url: str) -> str:
    """Convert sync DB URL to async URL."""
    if url.startswith("postgresql://"):
        return "postgresql+asyncpg://" + url[13:]
    if url.startswith("sqlite://"):
        return "sqlite+aiosqlite://" + url[9:]
    return url


def _to_sync_url(url: str) -> str:
    """Convert async DB URL to sync URL."""
    if url.startswith("sqlite+aiosqlite://"):
        return "sqlite://" + url[19:]
    if url.startswith("postgresql+asyncpg://"):
        return "postgresql://" + url[21:]
    return url


# Async engine/session (readiness probe, startup schema creation)
async_engine = create_async_engine(_to_async_url(settings.DATABASE_URL), pool_pre_ping=True)
AsyncSessionLocal = async_sessionmaker(async_engine, expire_on_commit=False)


async def init_db() -> None:
    """Create all database tables."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# Sync engine/session (import pipeline and contract routes)
sync_engine = create_engine(_to_sync_url(settings.DATABASE_URL), pool_pre_ping=True)
SessionLocal = sessionmaker(sync_engine, autocommit=False, autoflush=False)


@contextmanager
def get_sync_db() -> Iterator[Session]:
    """Sync DB session; commits on success, rolls back on error."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db_dependency() -> Iterator[Session]:
    """Sync DB session for FastAPI dependencies; caller owns commits."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
