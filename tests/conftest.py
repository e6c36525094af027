"""Pytest configuration and fixtures."""

import os

# Set test database URL BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.db.session import Base
from app.store.sqlalchemy_impl import SqlContractStore

IMPORT_DATE = date(2024, 1, 10)

CSV_HEADER = (
    "client_name,contract_number,vendor_name,contract_value,start_date,end_date,"
    "funding_source,section3_applicable,title,scope_of_work,section3_poc,"
    "section3_poc_email,section3_poc_phone"
)


def csv_text(*rows: str) -> str:
    """Build CSV content with the standard header."""
    return "\n".join([CSV_HEADER, *rows]) + "\n"


@pytest.fixture
def sample_csv():
    """Three valid contracts: two over the threshold, one under."""
    return csv_text(
        'DCHA,C-1001,Acme Builders,$250000,2024-03-01,2025-02-28,CDBG,,Roof Replacement,'
        "Replace roofs,Jane Doe,jane@acme.test,555-0100",
        "DCHA,C-1002,Small Repairs LLC,15000,2024-04-01,2024-09-30,HOME,,Painting,,,,",
        "DCHA,C-1003,Metro Construction,1200000.00,2024-05-15,2026-05-14,CDBG,,Senior Housing,,,,",
    )


@pytest.fixture(scope="function")
def sqlite_sessionmaker(tmp_path):
    """Create a SQLite database with schema for testing."""
    db_path = tmp_path / "test.db"
    engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    yield SessionLocal
    engine.dispose()


@pytest.fixture(scope="function")
def empty_sqlite_sessionmaker(tmp_path):
    """SQLite database without any tables."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'empty.db'}", connect_args={"check_same_thread": False}
    )
    yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    engine.dispose()


@pytest.fixture
def db_session(sqlite_sessionmaker):
    session = sqlite_sessionmaker()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db_session):
    """SQLAlchemy contract store over the test database."""
    return SqlContractStore(db_session)


@pytest.fixture
def mock_db_session():
    """Create a mock async database session."""
    mock_session = MagicMock()
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)
    mock_session.execute = AsyncMock()
    mock_session.run_sync = AsyncMock(return_value=[])
    mock_session.add = MagicMock()
    mock_session.commit = AsyncMock()
    return mock_session
