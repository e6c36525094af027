#!/usr/bin/env python3
"""
Create or upgrade the contract import tables with Alembic.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --database-url sqlite:///./section3.db
"""

import argparse
import logging
import sys

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.migrations import run_migrations

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Run database migrations")
    parser.add_argument("--database-url", default=settings.DATABASE_URL, help="Target database URL")
    args = parser.parse_args()

    setup_logging()
    try:
        run_migrations(args.database_url)
    except Exception as e:
        logger.error("Migration failed: %s", e)
        sys.exit(1)
    logger.info("Database schema is up to date")


if __name__ == "__main__":
    main()
