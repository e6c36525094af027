"""Shared dependencies for FastAPI routes and scripts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db_dependency
from app.store.sqlalchemy_impl import SqlContractStore

if TYPE_CHECKING:
    from app.integrations.contracts import HudReportingGateway

_hud_gateway: "HudReportingGateway | None" = None


def get_contract_store(db: Session = Depends(get_db_dependency)) -> SqlContractStore:
    """Contract store bound to a request-scoped sync session."""
    return SqlContractStore(db)


def get_hud_gateway() -> "HudReportingGateway":
    """Get or lazily initialize the HUD reporting gateway singleton.

    Only the in-process gateway exists today; a network client would be
    selected here.
    """
    global _hud_gateway
    if _hud_gateway is None:
        from app.integrations.fake_impl import FakeHudReportingGateway

        _hud_gateway = FakeHudReportingGateway()
    return _hud_gateway


__all__ = ["get_contract_store", "get_hud_gateway"]
