"""CSV export of an import summary for download."""

from __future__ import annotations

import csv
import io

from app.schemas.domain import ImportResult


def import_result_to_csv(result: ImportResult) -> str:
    """Serialize an :class:`ImportResult` as a two-column CSV report."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["field", "value"])
    writer.writerow(["success", str(result.success).lower()])
    writer.writerow(["total_rows", result.total_rows])
    writer.writerow(["contracts_inserted", result.contracts_inserted])
    writer.writerow(["contracts_skipped", result.contracts_skipped])
    writer.writerow(["error_count", len(result.errors)])

    summary = result.section3_summary
    if summary is not None:
        writer.writerow(["example_contract_number", summary.contract_number])
        writer.writerow(["example_contract_value", f"{summary.contract_value:.2f}"])
        writer.writerow(["applicability_subpart", summary.applicability_subpart])
        writer.writerow(["labor_hour_benchmark", summary.labor_hour_benchmark])
        writer.writerow(["targeted_benchmark", summary.targeted_benchmark])
        writer.writerow(["applicability_threshold", f"{summary.threshold:.2f}"])
        writer.writerow(["applicability_basis", "explicit" if summary.explicitly_set else "threshold"])
        writer.writerow(["tasks_generated", summary.tasks_generated])

    for error in result.errors:
        writer.writerow(["error", error])
    return buffer.getvalue()


__all__ = ["import_result_to_csv"]
