"""Repository helpers for contracts, compliance tasks and audit logs."""

from __future__ import annotations

from typing import Iterable, Optional
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.db.models import AuditLog, ComplianceTask, Contract, TaskStatus
from app.schemas.domain import ComplianceTaskDraft, ContractRecord, Section3Applicability


def find_contract(db: Session, client_name: str, contract_number: str) -> Optional[Contract]:
    return (
        db.query(Contract)
        .filter(Contract.client_name == client_name, Contract.contract_number == contract_number)
        .first()
    )


def get_contract(db: Session, contract_id: str) -> Optional[Contract]:
    return db.get(Contract, contract_id)


def list_contracts(db: Session, *, offset: int, limit: int) -> tuple[list[Contract], int]:
    total = db.query(func.count(Contract.id)).scalar() or 0
    rows = (
        db.query(Contract)
        .order_by(Contract.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return rows, total


def create_contract(
    db: Session,
    *,
    record: ContractRecord,
    applicability: Section3Applicability,
) -> Contract:
    poc = record.section3_point_of_contact
    contract = Contract(
        id=str(uuid4()),
        client_name=record.client_name,
        contract_number=record.contract_number,
        vendor_name=record.vendor_name,
        contract_value=record.contract_value,
        start_date=record.start_date,
        end_date=record.end_date,
        funding_source=record.funding_source,
        title=record.title,
        scope_of_work=record.scope_of_work,
        section3_applicable=applicability.is_applicable,
        applicability_subpart=applicability.subpart,
        applicability_reason=applicability.reason,
        labor_hour_benchmark=applicability.labor_hour_benchmark,
        targeted_section3_benchmark=applicability.targeted_benchmark,
        section3_poc_name=poc.name if poc else None,
        section3_poc_email=poc.email if poc else None,
        section3_poc_phone=poc.phone if poc else None,
    )
    db.add(contract)
    db.flush()
    db.refresh(contract)
    return contract


def add_tasks(
    db: Session,
    *,
    contract_id: str,
    tasks: Iterable[ComplianceTaskDraft],
) -> list[ComplianceTask]:
    rows = [
        ComplianceTask(
            id=str(uuid4()),
            contract_id=contract_id,
            task_type=task.task_type,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            priority=task.priority,
            status=TaskStatus(task.status),
            is_auto_generated=True,
            auto_generation_rule=task.auto_generation_rule,
        )
        for task in tasks
    ]
    db.add_all(rows)
    db.flush()
    return rows


def tasks_for_contract(db: Session, contract_id: str) -> list[ComplianceTask]:
    return (
        db.query(ComplianceTask)
        .filter(ComplianceTask.contract_id == contract_id)
        .order_by(ComplianceTask.due_date.asc())
        .all()
    )


def add_audit_log(
    db: Session,
    *,
    action_type: str,
    description: str,
    contract_id: Optional[str] = None,
) -> AuditLog:
    entry = AuditLog(
        id=str(uuid4()),
        contract_id=contract_id,
        action_type=action_type,
        description=description,
    )
    db.add(entry)
    db.flush()
    return entry

