"""API response models for contract endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class ContractResponse(BaseModel):
    """Single persisted contract."""

    id: str
    client_name: str
    contract_number: str
    vendor_name: str
    contract_value: Decimal
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    funding_source: str
    title: Optional[str] = None
    section3_applicable: bool
    applicability_subpart: str
    labor_hour_benchmark: int
    targeted_section3_benchmark: int
    created_at: datetime

    model_config = {"from_attributes": True}


class ContractListResponse(BaseModel):
    """Paginated contract list response."""

    items: list[ContractResponse]
    total: int
    page: int
    page_size: int


class ComplianceTaskResponse(BaseModel):
    """Single compliance task."""

    id: str
    task_type: str
    title: str
    description: Optional[str] = None
    due_date: date
    priority: str
    status: str
    auto_generation_rule: Optional[str] = None

    model_config = {"from_attributes": True}


class HudSyncResponse(BaseModel):
    """Acknowledgement of a HUD reporting submission."""

    contract_id: str
    system: str
    confirmation_number: str
    submitted_at: datetime
