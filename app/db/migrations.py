"""Alembic helper utilities for programmatic migrations."""
from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config

from app.db.session import _to_sync_url


def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database at ``database_url`` to ``revision``.

    Leaves the caller's logging configuration untouched.
    """
    base_path = Path(__file__).resolve().parents[2]
    alembic_cfg = Config(str(base_path / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(base_path / "alembic"))
    alembic_cfg.attributes["database_url_override"] = _to_sync_url(database_url)
    alembic_cfg.attributes["configure_logger"] = False
    command.upgrade(alembic_cfg, revision)
