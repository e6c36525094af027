"""Initial schema for contracts, compliance tasks and audit logs."""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    status_enum = sa.Enum("pending", "in_progress", "completed", "overdue", name="task_status")

    op.create_table(
        "contracts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("client_name", sa.String(length=255), nullable=False),
        sa.Column("contract_number", sa.String(length=120), nullable=False),
        sa.Column("vendor_name", sa.String(length=255), nullable=False),
        sa.Column("contract_value", sa.Numeric(14, 2), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("funding_source", sa.String(length=80), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("scope_of_work", sa.Text(), nullable=True),
        sa.Column("section3_applicable", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("applicability_subpart", sa.String(length=20), nullable=False, server_default="N/A"),
        sa.Column("applicability_reason", sa.Text(), nullable=True),
        sa.Column("labor_hour_benchmark", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("targeted_section3_benchmark", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("section3_poc_name", sa.String(length=255), nullable=True),
        sa.Column("section3_poc_email", sa.String(length=255), nullable=True),
        sa.Column("section3_poc_phone", sa.String(length=50), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("client_name", "contract_number", name="uq_contracts_client_number"),
    )

    op.create_table(
        "compliance_tasks",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("contract_id", sa.String(length=36), sa.ForeignKey("contracts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("task_type", sa.String(length=40), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("priority", sa.String(length=20), nullable=False, server_default="high"),
        sa.Column("status", status_enum, nullable=False, server_default="pending"),
        sa.Column("is_auto_generated", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("auto_generation_rule", sa.String(length=40), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("idx_compliance_tasks_contract_due", "compliance_tasks", ["contract_id", "due_date"])

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("contract_id", sa.String(length=36), sa.ForeignKey("contracts.id", ondelete="SET NULL"), nullable=True),
        sa.Column("action_type", sa.String(length=60), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("audit_logs")
    op.drop_index("idx_compliance_tasks_contract_due", table_name="compliance_tasks")
    op.drop_table("compliance_tasks")
    op.drop_table("contracts")
    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS task_status")
