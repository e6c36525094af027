"""Contract import, read and HUD sync endpoints."""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile
from fastapi.responses import Response

from app.core.config import settings
from app.deps import get_contract_store, get_hud_gateway
from app.integrations.contracts import HudReportingGateway, IntegrationError
from app.schemas.api import (
    ComplianceTaskResponse,
    ContractListResponse,
    ContractResponse,
    HudSyncResponse,
)
from app.schemas.domain import ImportResult, StoredContract
from app.services.contract_import import import_contracts
from app.services.export import import_result_to_csv
from app.store.contracts import ContractStore, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contracts", tags=["contracts"])


def _is_csv_upload(file: UploadFile) -> bool:
    return (file.filename or "").lower().endswith(".csv")


@router.post("/import", response_model=ImportResult)
def import_contracts_csv(
    file: UploadFile,
    format: Literal["json", "csv"] = Query("json"),
    store: ContractStore = Depends(get_contract_store),
):
    """Import contracts from an uploaded CSV file."""
    if not _is_csv_upload(file):
        raise HTTPException(status_code=400, detail="Only CSV files supported")

    content = file.file.read()
    max_bytes = settings.MAX_IMPORT_FILE_SIZE_MB * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.MAX_IMPORT_FILE_SIZE_MB}MB limit",
        )

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV file must be UTF-8 encoded")

    result = import_contracts(text, store)
    logger.info(
        "Imported %s: inserted=%d skipped=%d errors=%d",
        file.filename,
        result.contracts_inserted,
        result.contracts_skipped,
        len(result.errors),
    )

    if format == "csv":
        return Response(
            content=import_result_to_csv(result),
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="import-summary.csv"'},
        )
    return result


@router.get("", response_model=ContractListResponse)
def list_contracts(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    store: ContractStore = Depends(get_contract_store),
):
    """List imported contracts with pagination, newest first."""
    try:
        contracts, total = store.list_contracts(offset=(page - 1) * page_size, limit=page_size)
    except StoreError as e:
        logger.error("Listing contracts failed: %s", e)
        raise HTTPException(status_code=503, detail="Database unavailable")

    items = [ContractResponse.model_validate(c) for c in contracts]
    return ContractListResponse(items=items, total=total, page=page, page_size=page_size)


def _get_contract_or_404(store: ContractStore, contract_id: str) -> StoredContract:
    try:
        contract = store.get_contract(contract_id)
    except StoreError as e:
        logger.error("Loading contract %s failed: %s", contract_id, e)
        raise HTTPException(status_code=503, detail="Database unavailable")
    if not contract:
        raise HTTPException(status_code=404, detail="Contract not found")
    return contract


@router.get("/{contract_id}/tasks", response_model=list[ComplianceTaskResponse])
def list_contract_tasks(
    contract_id: str,
    store: ContractStore = Depends(get_contract_store),
):
    """Compliance tasks for a contract, earliest due first."""
    _get_contract_or_404(store, contract_id)

    try:
        tasks = store.list_tasks(contract_id)
    except StoreError as e:
        logger.error("Listing tasks for contract %s failed: %s", contract_id, e)
        raise HTTPException(status_code=503, detail="Database unavailable")
    return [ComplianceTaskResponse.model_validate(task) for task in tasks]


@router.post("/{contract_id}/hud-sync", response_model=HudSyncResponse)
def sync_contract_to_hud(
    contract_id: str,
    store: ContractStore = Depends(get_contract_store),
    gateway: HudReportingGateway = Depends(get_hud_gateway),
):
    """Submit a Section 3 applicable contract to HUD reporting."""
    contract = _get_contract_or_404(store, contract_id)
    if not contract.section3_applicable:
        raise HTTPException(status_code=409, detail="Contract is not Section 3 applicable")

    try:
        receipt = gateway.submit_contract(contract)
    except IntegrationError as e:
        logger.error("HUD sync failed for contract %s: %s", contract_id, e)
        raise HTTPException(status_code=502, detail=f"HUD reporting failed: {e.message}")

    try:
        store.record_audit_event(
            "hud_sync_submitted",
            f"Submitted to {receipt.system}: {receipt.confirmation_number}",
            contract_id=contract_id,
        )
    except StoreError as e:
        logger.warning("Audit log write failed for HUD sync of %s: %s", contract_id, e)

    return HudSyncResponse(
        contract_id=contract_id,
        system=receipt.system,
        confirmation_number=receipt.confirmation_number,
        submitted_at=receipt.submitted_at,
    )
