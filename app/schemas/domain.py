"""Domain models for the Section 3 contract import pipeline."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PointOfContact(BaseModel):
    """Section 3 point of contact for a contract."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ContractRecord(BaseModel):
    """A contract row after mapping and validation.

    ``section3_applicable`` is ``None`` until applicability has been
    resolved, either from the import row or from the contract value.
    """

    client_name: str
    contract_number: str
    vendor_name: str
    contract_value: Decimal
    start_date: Optional[date] = None  # ISO format YYYY-MM-DD
    end_date: Optional[date] = None
    funding_source: str  # e.g. CDBG, HOME; free text
    section3_applicable: Optional[bool] = None
    title: Optional[str] = None
    scope_of_work: Optional[str] = None
    section3_point_of_contact: Optional[PointOfContact] = None

    @property
    def natural_key(self) -> tuple[str, str]:
        return self.client_name, self.contract_number


class StoredContract(ContractRecord):
    """A persisted contract with its derived applicability fields."""

    id: str
    section3_applicable: bool
    applicability_subpart: str = "N/A"
    applicability_reason: Optional[str] = None
    labor_hour_benchmark: int = 0
    targeted_section3_benchmark: int = 0
    created_at: datetime


class Section3Applicability(BaseModel):
    """Outcome of the applicability and benchmark calculation."""

    is_applicable: bool
    explicit: bool = False
    subpart: str = "N/A"
    threshold: Decimal
    labor_hour_benchmark: int = 0
    targeted_benchmark: int = 0
    reason: str


class ComplianceTaskDraft(BaseModel):
    """A compliance task generated at import time, before persistence."""

    task_type: str
    title: str
    description: str
    due_date: date
    priority: str = "high"
    status: str = "pending"
    auto_generation_rule: str = "onCreateContract"


class StoredComplianceTask(ComplianceTaskDraft):
    """A persisted compliance task."""

    id: str


class Section3Summary(BaseModel):
    """Snapshot of the first Section 3 applicable contract in a batch."""

    contract_number: str
    contract_value: Decimal
    section3_applicable: bool
    applicability_subpart: str
    labor_hour_benchmark: int
    targeted_benchmark: int
    threshold: Decimal
    explicitly_set: bool = False  # applicability came from the row, not the threshold
    tasks_generated: int


class ImportResult(BaseModel):
    """Aggregate outcome of one CSV import run."""

    success: bool = False
    total_rows: int = 0
    contracts_inserted: int = 0
    contracts_skipped: int = 0
    errors: list[str] = Field(default_factory=list)
    setup_required: bool = False
    example_contract: Optional[ContractRecord] = None
    example_tasks: list[ComplianceTaskDraft] = Field(default_factory=list)
    section3_summary: Optional[Section3Summary] = None
