"""Persistence interfaces and error types for the contract import pipeline."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from app.schemas.domain import (
    ComplianceTaskDraft,
    ContractRecord,
    Section3Applicability,
    StoredComplianceTask,
    StoredContract,
)

SCHEMA_MISSING_MESSAGE = (
    "Database tables not initialized. Please run the initialization script first "
    "(python scripts/init_db.py) to create the required tables."
)


class StoreError(Exception):
    """Wraps underlying persistence exceptions with operation context."""

    def __init__(self, op: str, key: str | None, message: str):
        self.op = op
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:
        key_repr = self.key or "<none>"
        return f"{self.op} failed for key={key_repr}: {self.message}"


class SchemaNotInitializedError(StoreError):
    """Backing tables do not exist yet; the caller should point at setup."""

    def __init__(self, missing_tables: Sequence[str]):
        self.missing_tables = list(missing_tables)
        super().__init__(
            op="ensure_schema",
            key=None,
            message=f"missing tables: {', '.join(self.missing_tables)}",
        )

    def __str__(self) -> str:
        return SCHEMA_MISSING_MESSAGE


class DuplicateContractError(StoreError):
    """Insert rejected by the (client_name, contract_number) unique key."""


@runtime_checkable
class ContractStore(Protocol):
    """Contract/task persistence used by the import pipeline and the API."""

    def ensure_schema(self) -> None:
        ...

    def contract_exists(self, client_name: str, contract_number: str) -> bool:
        ...

    def get_contract(self, contract_id: str) -> Optional[StoredContract]:
        ...

    def list_contracts(self, *, offset: int, limit: int) -> tuple[list[StoredContract], int]:
        ...

    def insert_contract(
        self, record: ContractRecord, applicability: Section3Applicability
    ) -> str:
        ...

    def insert_tasks(self, contract_id: str, tasks: Sequence[ComplianceTaskDraft]) -> int:
        ...

    def list_tasks(self, contract_id: str) -> list[StoredComplianceTask]:
        ...

    def record_audit_event(
        self, action_type: str, description: str, *, contract_id: Optional[str] = None
    ) -> None:
        ...


__all__ = [
    "SCHEMA_MISSING_MESSAGE",
    "ContractStore",
    "DuplicateContractError",
    "SchemaNotInitializedError",
    "StoreError",
]
