"""Health check endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.db.session import AsyncSessionLocal
from app.store.sqlalchemy_impl import missing_tables

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe - checks the database and that the import tables exist."""
    checks = {}
    all_ok = True

    try:
        async with AsyncSessionLocal() as db:
            await db.execute(text("SELECT 1"))
            missing = await db.run_sync(lambda session: missing_tables(session.connection()))
        checks["database"] = "ok"
        if missing:
            checks["schema"] = "missing: " + ", ".join(missing)
            all_ok = False
        else:
            checks["schema"] = "ok"
    except Exception as e:
        logger.warning("Readiness database check failed: %s", e)
        checks["database"] = f"error: {e}"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={"status": "ok" if all_ok else "degraded", "checks": checks},
    )
