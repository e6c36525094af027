"""Logging configuration."""

import logging
import os

from app.core.config import settings


def setup_logging() -> None:
    """Configure application logging for the API and import scripts."""
    level = os.getenv("LOG_LEVEL", settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # SQL echo is noisy at INFO during bulk imports
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
