"""Initial compliance tasks for Section 3 applicable contracts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Literal

from app.schemas.domain import ComplianceTaskDraft, ContractRecord

# Used as the contract term when a row has no end date
DEFAULT_TERM_DAYS = 365


@dataclass(frozen=True, slots=True)
class TaskTemplate:
    task_type: str
    title: str
    description: str
    anchor: Literal["start", "end"]
    offset_days: int


INITIAL_TASKS: tuple[TaskTemplate, ...] = (
    TaskTemplate(
        task_type="document_upload",
        title="Section 3 Action Plan Submission",
        description=(
            "Submit Section 3 Action Plan detailing recruitment, training, and outreach "
            "strategies for this contract."
        ),
        anchor="start",
        offset_days=14,
    ),
    TaskTemplate(
        task_type="worker_verification",
        title="Worker Verification Log Setup",
        description=(
            "Set up worker verification log and begin collecting Section 3 eligibility "
            "documentation for all workers."
        ),
        anchor="start",
        offset_days=30,
    ),
    TaskTemplate(
        task_type="report_submission",
        title="First Quarterly Report",
        description=(
            "Submit first quarterly Section 3 compliance report including labor hours, "
            "worker counts, and qualitative efforts."
        ),
        anchor="start",
        offset_days=90,
    ),
    TaskTemplate(
        task_type="report_submission",
        title="Final Report",
        description=(
            "Submit final Section 3 compliance report summarizing all activities, outcomes, "
            "and lessons learned for this contract."
        ),
        anchor="end",
        offset_days=15,
    ),
)


def generate_initial_tasks(record: ContractRecord, *, today: date) -> list[ComplianceTaskDraft]:
    """Build the initial task set for a contract.

    Non-applicable contracts get no tasks. Offsets are measured from the
    contract start date (``today`` when the row has none); the final
    report is measured from the end date, or from start plus
    ``DEFAULT_TERM_DAYS`` when the row has none.
    """
    if not record.section3_applicable:
        return []

    start = record.start_date or today
    end = record.end_date or start + timedelta(days=DEFAULT_TERM_DAYS)
    anchors = {"start": start, "end": end}

    return [
        ComplianceTaskDraft(
            task_type=template.task_type,
            title=template.title,
            description=template.description,
            due_date=anchors[template.anchor] + timedelta(days=template.offset_days),
        )
        for template in INITIAL_TASKS
    ]


__all__ = ["DEFAULT_TERM_DAYS", "INITIAL_TASKS", "TaskTemplate", "generate_initial_tasks"]
