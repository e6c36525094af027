from __future__ import annotations

"""SQLAlchemy models for imported contracts, compliance tasks and audit logs."""

import enum
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class TaskStatus(str, enum.Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    overdue = "overdue"


class Contract(Base):
    __tablename__ = "contracts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contract_number: Mapped[str] = mapped_column(String(120), nullable=False)
    vendor_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contract_value: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    start_date: Mapped[Optional[date]] = mapped_column(Date)
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    funding_source: Mapped[str] = mapped_column(String(80), nullable=False)  # e.g., CDBG, HOME
    title: Mapped[Optional[str]] = mapped_column(String(255))
    scope_of_work: Mapped[Optional[str]] = mapped_column(Text)

    section3_applicable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    applicability_subpart: Mapped[str] = mapped_column(String(20), nullable=False, default="N/A")
    applicability_reason: Mapped[Optional[str]] = mapped_column(Text)
    labor_hour_benchmark: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    targeted_section3_benchmark: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    section3_poc_name: Mapped[Optional[str]] = mapped_column(String(255))
    section3_poc_email: Mapped[Optional[str]] = mapped_column(String(255))
    section3_poc_phone: Mapped[Optional[str]] = mapped_column(String(50))

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    tasks: Mapped[list["ComplianceTask"]] = relationship(
        "ComplianceTask",
        back_populates="contract",
        cascade="all, delete-orphan",
        order_by="ComplianceTask.due_date",
    )

    __table_args__ = (
        UniqueConstraint("client_name", "contract_number", name="uq_contracts_client_number"),
    )


class ComplianceTask(Base):
    __tablename__ = "compliance_tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    contract_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("contracts.id", ondelete="CASCADE"), nullable=False
    )
    task_type: Mapped[str] = mapped_column(String(40), nullable=False)  # e.g., report_submission
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="high")
    status: Mapped[TaskStatus] = mapped_column(
        SAEnum(TaskStatus, name="task_status"), nullable=False, default=TaskStatus.pending
    )
    is_auto_generated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    auto_generation_rule: Mapped[Optional[str]] = mapped_column(String(40))

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    contract: Mapped["Contract"] = relationship("Contract", back_populates="tasks")

    __table_args__ = (
        Index("idx_compliance_tasks_contract_due", "contract_id", "due_date"),
    )


class AuditLog(Base):
    __tablename__ = "audit_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    contract_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("contracts.id", ondelete="SET NULL")
    )
    action_type: Mapped[str] = mapped_column(String(60), nullable=False)  # e.g., contract_imported
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
