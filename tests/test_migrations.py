"""Tests for the Alembic migration helper."""

from sqlalchemy import create_engine, inspect

from app.db.migrations import run_migrations
from app.db.session import Base


def test_run_migrations_creates_schema(tmp_path):
    db_path = tmp_path / "migrated.db"

    run_migrations(f"sqlite:///{db_path}")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        assert {"contracts", "compliance_tasks", "audit_logs", "alembic_version"} <= tables
        for name in ("contracts", "compliance_tasks", "audit_logs"):
            migrated = {col["name"] for col in inspector.get_columns(name)}
            modeled = {col.name for col in Base.metadata.tables[name].columns}
            assert migrated == modeled
    finally:
        engine.dispose()


def test_run_migrations_accepts_async_url(tmp_path):
    db_path = tmp_path / "async.db"

    run_migrations(f"sqlite+aiosqlite:///{db_path}")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert inspect(engine).has_table("contracts")
    finally:
        engine.dispose()
