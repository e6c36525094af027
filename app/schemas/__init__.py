"""Domain schemas for the contract import pipeline."""

from app.schemas.domain import (
    ComplianceTaskDraft,
    ContractRecord,
    ImportResult,
    PointOfContact,
    Section3Applicability,
    Section3Summary,
    StoredComplianceTask,
    StoredContract,
)

__all__ = [
    "ComplianceTaskDraft",
    "ContractRecord",
    "ImportResult",
    "PointOfContact",
    "Section3Applicability",
    "Section3Summary",
    "StoredComplianceTask",
    "StoredContract",
]
