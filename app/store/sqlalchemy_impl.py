"""SQLAlchemy-backed implementation of the contract store."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.db import repository
from app.db.models import Contract
from app.schemas.domain import (
    ComplianceTaskDraft,
    ContractRecord,
    PointOfContact,
    Section3Applicability,
    StoredComplianceTask,
    StoredContract,
)
from app.store.contracts import (
    ContractStore,
    DuplicateContractError,
    SchemaNotInitializedError,
    StoreError,
)

REQUIRED_TABLES = ("contracts", "compliance_tasks", "audit_logs")


def _key(client_name: str, contract_number: str) -> str:
    return f"{client_name}/{contract_number}"


def _to_stored_contract(row: Contract) -> StoredContract:
    poc = None
    if row.section3_poc_name or row.section3_poc_email or row.section3_poc_phone:
        poc = PointOfContact(
            name=row.section3_poc_name,
            email=row.section3_poc_email,
            phone=row.section3_poc_phone,
        )
    return StoredContract(
        id=row.id,
        client_name=row.client_name,
        contract_number=row.contract_number,
        vendor_name=row.vendor_name,
        contract_value=row.contract_value,
        start_date=row.start_date,
        end_date=row.end_date,
        funding_source=row.funding_source,
        title=row.title,
        scope_of_work=row.scope_of_work,
        section3_point_of_contact=poc,
        section3_applicable=row.section3_applicable,
        applicability_subpart=row.applicability_subpart,
        applicability_reason=row.applicability_reason,
        labor_hour_benchmark=row.labor_hour_benchmark,
        targeted_section3_benchmark=row.targeted_section3_benchmark,
        created_at=row.created_at,
    )


def missing_tables(bind) -> list[str]:
    """Return the required tables absent from the database behind ``bind``."""
    inspector = inspect(bind)
    return [name for name in REQUIRED_TABLES if not inspector.has_table(name)]


class SqlContractStore(ContractStore):
    """Contract store over a sync SQLAlchemy session.

    Every write commits on its own: a contract stays inserted even if
    the follow-up task insert fails.
    """

    def __init__(self, session: Session):
        self._session = session

    def ensure_schema(self) -> None:
        try:
            missing = missing_tables(self._session.connection())
        except SQLAlchemyError as exc:
            raise StoreError("ensure_schema", None, str(exc)) from exc
        if missing:
            raise SchemaNotInitializedError(missing)

    def contract_exists(self, client_name: str, contract_number: str) -> bool:
        try:
            return repository.find_contract(self._session, client_name, contract_number) is not None
        except SQLAlchemyError as exc:
            raise StoreError("contract_exists", _key(client_name, contract_number), str(exc)) from exc

    def get_contract(self, contract_id: str) -> Optional[StoredContract]:
        try:
            row = repository.get_contract(self._session, contract_id)
        except SQLAlchemyError as exc:
            raise StoreError("get_contract", contract_id, str(exc)) from exc
        return _to_stored_contract(row) if row is not None else None

    def list_contracts(self, *, offset: int, limit: int) -> tuple[list[StoredContract], int]:
        try:
            rows, total = repository.list_contracts(self._session, offset=offset, limit=limit)
        except SQLAlchemyError as exc:
            raise StoreError("list_contracts", None, str(exc)) from exc
        return [_to_stored_contract(row) for row in rows], total

    def insert_contract(
        self, record: ContractRecord, applicability: Section3Applicability
    ) -> str:
        key = _key(*record.natural_key)
        try:
            contract = repository.create_contract(
                self._session, record=record, applicability=applicability
            )
            self._session.commit()
            return contract.id
        except IntegrityError as exc:
            self._session.rollback()
            raise DuplicateContractError("insert_contract", key, "contract already exists") from exc
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise StoreError("insert_contract", key, str(exc)) from exc

    def insert_tasks(self, contract_id: str, tasks: Sequence[ComplianceTaskDraft]) -> int:
        try:
            rows = repository.add_tasks(self._session, contract_id=contract_id, tasks=tasks)
            self._session.commit()
            return len(rows)
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise StoreError("insert_tasks", contract_id, str(exc)) from exc

    def list_tasks(self, contract_id: str) -> list[StoredComplianceTask]:
        try:
            rows = repository.tasks_for_contract(self._session, contract_id)
        except SQLAlchemyError as exc:
            raise StoreError("list_tasks", contract_id, str(exc)) from exc
        return [
            StoredComplianceTask(
                id=row.id,
                task_type=row.task_type,
                title=row.title,
                description=row.description or "",
                due_date=row.due_date,
                priority=row.priority,
                status=row.status.value,
                auto_generation_rule=row.auto_generation_rule or "",
            )
            for row in rows
        ]

    def record_audit_event(
        self, action_type: str, description: str, *, contract_id: Optional[str] = None
    ) -> None:
        try:
            repository.add_audit_log(
                self._session,
                action_type=action_type,
                description=description,
                contract_id=contract_id,
            )
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise StoreError("record_audit_event", contract_id, str(exc)) from exc


__all__ = ["REQUIRED_TABLES", "SqlContractStore", "missing_tables"]
