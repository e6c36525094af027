"""In-process stand-in for the HUD reporting systems."""

from __future__ import annotations

import hashlib
import logging
from collections import deque
from datetime import datetime

from app.integrations.contracts import HudReportingGateway, IntegrationError, SubmissionReceipt
from app.schemas.domain import ContractRecord

logger = logging.getLogger(__name__)

MAX_RECENT_SUBMISSIONS = 100


class FakeHudReportingGateway(HudReportingGateway):
    """Deterministic HUD gateway that never leaves the process.

    Confirmation numbers are derived from the contract's natural key, so
    resubmitting the same contract yields the same number. Only the most
    recent ``max_recent`` receipts are kept in ``submissions``.
    """

    def __init__(self, system: str = "SPEARS", max_recent: int = MAX_RECENT_SUBMISSIONS):
        self.system = system
        self.submissions: deque[SubmissionReceipt] = deque(maxlen=max_recent)

    def submit_contract(self, contract: ContractRecord) -> SubmissionReceipt:
        if not contract.section3_applicable:
            raise IntegrationError(self.system, "only Section 3 applicable contracts are reportable")

        digest = hashlib.sha1("/".join(contract.natural_key).encode("utf-8")).hexdigest()
        receipt = SubmissionReceipt(
            system=self.system,
            confirmation_number=f"{self.system}-{digest[:10].upper()}",
            contract_number=contract.contract_number,
            submitted_at=datetime.utcnow(),
        )
        self.submissions.append(receipt)
        logger.info(
            "Recorded %s submission for contract %s (%s)",
            self.system,
            contract.contract_number,
            receipt.confirmation_number,
        )
        return receipt


__all__ = ["FakeHudReportingGateway"]
