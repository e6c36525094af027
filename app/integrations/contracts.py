"""HUD reporting interfaces (SPEARS / IDIS) and error types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

from app.schemas.domain import ContractRecord


class IntegrationError(Exception):
    """Wraps failures of an external HUD system with the system name."""

    def __init__(self, system: str, message: str):
        self.system = system
        self.message = message
        super().__init__(f"{system}: {message}")


@dataclass(frozen=True, slots=True)
class SubmissionReceipt:
    """Acknowledgement returned by a HUD reporting system."""

    system: str
    confirmation_number: str
    contract_number: str
    submitted_at: datetime


@runtime_checkable
class HudReportingGateway(Protocol):
    """Contract for HUD reporting system clients."""

    def submit_contract(self, contract: ContractRecord) -> SubmissionReceipt:
        ...


__all__ = ["HudReportingGateway", "IntegrationError", "SubmissionReceipt"]
