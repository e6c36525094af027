"""Contract import orchestrator.

Drives parse -> map/validate -> applicability -> persist -> task generation
over one CSV file and returns an :class:`ImportResult`. Rows are processed
sequentially in input order; row-level problems are collected into
``ImportResult.errors`` and never abort the batch.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from app.core.config import settings
from app.db.session import get_sync_db
from app.schemas.domain import ContractRecord, ImportResult, Section3Applicability, Section3Summary
from app.services.applicability import determine_applicability
from app.services.contract_mapper import map_row
from app.services.csv_parser import QuoteMode, parse_rows
from app.services.errors import EmptyInputError, RowValidationError
from app.services.task_generator import generate_initial_tasks
from app.store.contracts import (
    ContractStore,
    DuplicateContractError,
    SchemaNotInitializedError,
    StoreError,
)
from app.store.sqlalchemy_impl import SqlContractStore

logger = logging.getLogger(__name__)


class ContractImporter:
    """Single-pass CSV contract importer over a :class:`ContractStore`."""

    def __init__(
        self,
        store: ContractStore,
        *,
        quoting: QuoteMode | str | None = None,
        today: Optional[date] = None,
    ):
        self._store = store
        self._quoting = QuoteMode(quoting or settings.CSV_QUOTING)
        self._today = today

    def run(self, csv_text: str) -> ImportResult:
        result = ImportResult()
        today = self._today or date.today()

        try:
            rows = parse_rows(csv_text, quoting=self._quoting)
        except EmptyInputError as e:
            logger.warning("Rejected contract import: %s", e)
            result.errors.append(str(e))
            return result

        try:
            self._store.ensure_schema()
        except SchemaNotInitializedError as e:
            logger.error("Contract import aborted: %s", e.message)
            result.errors.append(str(e))
            result.setup_required = True
            return result
        except StoreError as e:
            logger.error("Contract import aborted: %s", e)
            result.errors.append(f"Database unavailable: {e.message}")
            return result

        result.total_rows = len(rows)
        logger.info("Starting contract import: %d rows", result.total_rows)

        seen: set[tuple[str, str]] = set()
        for row_number, row in enumerate(rows, start=1):
            self._import_row(row, row_number, seen, result, today)

        self._audit(
            "bulk_import_completed",
            f"CSV import completed: {result.contracts_inserted} contracts inserted, "
            f"{result.contracts_skipped} skipped, {len(result.errors)} errors",
        )
        result.success = True
        logger.info(
            "Contract import complete: total=%d inserted=%d skipped=%d errors=%d",
            result.total_rows,
            result.contracts_inserted,
            result.contracts_skipped,
            len(result.errors),
        )
        return result

    def _import_row(
        self,
        row: dict[str, str],
        row_number: int,
        seen: set[tuple[str, str]],
        result: ImportResult,
        today: date,
    ) -> None:
        try:
            record = map_row(row, row_number)
        except RowValidationError as e:
            logger.warning("Skipping invalid row: %s", e)
            result.errors.append(str(e))
            return

        label = f"Row {row_number} ({record.contract_number})"
        key = record.natural_key
        try:
            duplicate = key in seen or self._store.contract_exists(*key)
        except StoreError as e:
            result.errors.append(f"{label}: duplicate check failed - {e.message}")
            return
        if duplicate:
            logger.info("Skipping duplicate contract %s/%s", *key)
            result.contracts_skipped += 1
            return

        applicability = determine_applicability(record.contract_value, record.section3_applicable)
        record = record.model_copy(update={"section3_applicable": applicability.is_applicable})

        try:
            contract_id = self._store.insert_contract(record, applicability)
        except DuplicateContractError:
            logger.info("Skipping duplicate contract %s/%s", *key)
            result.contracts_skipped += 1
            return
        except StoreError as e:
            logger.warning("Failed to insert contract %s/%s: %s", key[0], key[1], e)
            result.errors.append(f"{label}: failed to insert contract - {e.message}")
            return

        seen.add(key)
        result.contracts_inserted += 1
        self._audit(
            "contract_imported",
            f"Imported contract {record.contract_number} for {record.client_name} from CSV",
            contract_id=contract_id,
        )

        if applicability.is_applicable:
            self._generate_tasks(record, contract_id, label, applicability, result, today)

    def _generate_tasks(
        self,
        record: ContractRecord,
        contract_id: str,
        label: str,
        applicability: Section3Applicability,
        result: ImportResult,
        today: date,
    ) -> None:
        tasks = generate_initial_tasks(record, today=today)
        try:
            self._store.insert_tasks(contract_id, tasks)
        except StoreError as e:
            logger.warning("Contract %s inserted but task insert failed: %s", contract_id, e)
            result.errors.append(
                f"{label}: contract inserted but compliance task generation failed - {e.message}"
            )
            return

        self._audit(
            "tasks_auto_generated",
            f"Auto-generated {len(tasks)} compliance tasks for Section 3 applicable "
            f"contract {record.contract_number}",
            contract_id=contract_id,
        )

        if result.example_contract is None:
            result.example_contract = record
            result.example_tasks = tasks
            result.section3_summary = Section3Summary(
                contract_number=record.contract_number,
                contract_value=record.contract_value,
                section3_applicable=True,
                applicability_subpart=applicability.subpart,
                labor_hour_benchmark=applicability.labor_hour_benchmark,
                targeted_benchmark=applicability.targeted_benchmark,
                threshold=applicability.threshold,
                explicitly_set=applicability.explicit,
                tasks_generated=len(tasks),
            )

    def _audit(self, action_type: str, description: str, *, contract_id: Optional[str] = None) -> None:
        # Audit entries are best-effort and never affect the import outcome
        try:
            self._store.record_audit_event(action_type, description, contract_id=contract_id)
        except StoreError as e:
            logger.warning("Audit log write failed (%s): %s", action_type, e)


def import_contracts(
    csv_text: str,
    store: ContractStore,
    *,
    quoting: QuoteMode | str | None = None,
    today: Optional[date] = None,
) -> ImportResult:
    """Import contracts from CSV text into ``store``.

    Batch-fatal conditions (empty input, missing schema) yield a result
    with ``success=False`` and a single error; everything else is
    reported per row.
    """
    return ContractImporter(store, quoting=quoting, today=today).run(csv_text)


def import_csv_file(
    path: str | Path,
    *,
    quoting: QuoteMode | str | None = None,
    today: Optional[date] = None,
) -> ImportResult:
    """Import a CSV file straight into the configured database, bypassing the API."""
    csv_text = Path(path).read_text(encoding="utf-8-sig")
    with get_sync_db() as db:
        return import_contracts(csv_text, SqlContractStore(db), quoting=quoting, today=today)


__all__ = ["ContractImporter", "import_contracts", "import_csv_file"]
