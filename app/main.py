"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import setup_logging
from app.db import init_db
from app.routes import contracts_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup."""
    setup_logging()

    # Production schemas come from Alembic (scripts/init_db.py)
    if settings.AUTO_CREATE_SCHEMA:
        await init_db()
        logger.info("Database tables created for %s environment", settings.APP_ENV)

    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Register routers
app.include_router(health_router)
app.include_router(contracts_router)
