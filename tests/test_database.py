"""Tests for database layer and models (SQLite file for unit scope)."""

from datetime import date
from decimal import Decimal
from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError

from app.db.models import AuditLog, ComplianceTask, Contract, TaskStatus


@pytest.fixture(scope="function")
def test_db(sqlite_sessionmaker):
    """Session factory backed by SQLite file with schema created."""
    return sqlite_sessionmaker


def make_contract(**overrides) -> Contract:
    values = dict(
        client_name="DCHA",
        contract_number="C-1",
        vendor_name="Acme Builders",
        contract_value=Decimal("250000.00"),
        start_date=date(2024, 3, 1),
        end_date=date(2025, 2, 28),
        funding_source="CDBG",
    )
    values.update(overrides)
    return Contract(**values)


def test_create_contract_defaults(test_db):
    """Defaults are applied for derived applicability columns."""
    session = test_db()
    try:
        contract = make_contract()
        session.add(contract)
        session.commit()

        assert contract.id is not None
        assert isinstance(contract.id, UUID) or isinstance(contract.id, str)
        assert contract.section3_applicable is False
        assert contract.applicability_subpart == "N/A"
        assert contract.labor_hour_benchmark == 0
        assert contract.created_at is not None
    finally:
        session.close()


def test_contract_value_round_trip(test_db):
    """Currency is stored with two decimal places."""
    session = test_db()
    try:
        session.add(make_contract(contract_value=Decimal("1234567.89")))
        session.commit()
        stored = session.query(Contract).one()
        assert stored.contract_value == Decimal("1234567.89")
        assert stored.start_date == date(2024, 3, 1)
    finally:
        session.close()


def test_natural_key_unique(test_db):
    """The same contract number under one client is rejected."""
    session = test_db()
    try:
        session.add(make_contract())
        session.commit()
        session.add(make_contract(vendor_name="Other"))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()

        session.add(make_contract(client_name="HABC"))
        session.commit()
        assert session.query(Contract).count() == 2
    finally:
        session.close()


def test_contract_task_relationship(test_db):
    """Tasks come back ordered by due date through the relationship."""
    session = test_db()
    try:
        contract = make_contract()
        session.add(contract)
        session.commit()

        session.add_all(
            [
                ComplianceTask(
                    contract_id=contract.id,
                    task_type="report_submission",
                    title="Final Report",
                    due_date=date(2025, 3, 15),
                ),
                ComplianceTask(
                    contract_id=contract.id,
                    task_type="document_upload",
                    title="Section 3 Action Plan Submission",
                    due_date=date(2024, 3, 15),
                ),
            ]
        )
        session.commit()
        session.refresh(contract)

        assert [t.title for t in contract.tasks] == ["Section 3 Action Plan Submission", "Final Report"]
        assert contract.tasks[0].status == TaskStatus.pending
        assert contract.tasks[0].priority == "high"
        assert contract.tasks[0].contract.contract_number == "C-1"
    finally:
        session.close()


def test_audit_log_without_contract(test_db):
    """Batch-level audit entries have no contract."""
    session = test_db()
    try:
        session.add(AuditLog(action_type="bulk_import_completed", description="done"))
        session.commit()
        entry = session.query(AuditLog).one()
        assert entry.contract_id is None
    finally:
        session.close()
