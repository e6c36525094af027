#!/usr/bin/env python3
"""
Import a contracts CSV through a running API, or directly with --local, and print the result.

Prerequisites:
    1. API running: uvicorn app.main:app
    2. Tables created: python scripts/init_db.py

Usage:
    python scripts/import_contracts.py contracts.csv

    # Save the downloadable summary instead of printing:
    python scripts/import_contracts.py contracts.csv --summary-csv summary.csv

    # Output raw JSON:
    python scripts/import_contracts.py contracts.csv --json

    # Import straight into DATABASE_URL without a running API:
    python scripts/import_contracts.py contracts.csv --local
"""

import argparse
import json
import sys
from pathlib import Path

import httpx

# Configuration
API_BASE = "http://localhost:8000"
MAX_ERRORS_SHOWN = 10


def check_readiness(client: httpx.Client) -> dict:
    """Check readiness of the database and schema."""
    try:
        resp = client.get(f"{API_BASE}/health/ready")
        return resp.json()
    except httpx.RequestError as e:
        return {"error": str(e)}


def upload_csv(client: httpx.Client, file_path: Path, fmt: str = "json") -> httpx.Response:
    """Upload a CSV file to the import endpoint."""
    with open(file_path, "rb") as f:
        files = {"file": (file_path.name, f, "text/csv")}
        resp = client.post(f"{API_BASE}/api/contracts/import", files=files, params={"format": fmt})
        resp.raise_for_status()
        return resp


def print_import_result(result: dict) -> None:
    """Pretty print an import result."""
    print("\n" + "=" * 60)
    print("IMPORT RESULTS")
    print("=" * 60)

    print(f"\nStatus: {'SUCCESS' if result.get('success') else 'FAILED'}")
    print(f"Total Rows Processed: {result.get('total_rows', 0)}")
    print(f"Contracts Inserted: {result.get('contracts_inserted', 0)}")
    print(f"Contracts Skipped: {result.get('contracts_skipped', 0)}")

    errors = result.get("errors", [])
    print(f"Errors: {len(errors)}")
    for index, error in enumerate(errors[:MAX_ERRORS_SHOWN], start=1):
        print(f"  {index}. {error}")
    if len(errors) > MAX_ERRORS_SHOWN:
        print(f"  ... and {len(errors) - MAX_ERRORS_SHOWN} more")

    if result.get("setup_required"):
        print("\nDatabase tables are missing. Run: python scripts/init_db.py")

    summary = result.get("section3_summary")
    if summary:
        print("\n--- Section 3 Applicability (first applicable contract) ---")
        print(f"  Contract Number: {summary['contract_number']}")
        print(f"  Contract Value: ${float(summary['contract_value']):,.2f}")
        print(f"  Subpart: {summary['applicability_subpart']}")
        print(f"  Labor Hour Benchmark: {summary['labor_hour_benchmark']}%")
        print(f"  Targeted Benchmark: {summary['targeted_benchmark']}%")
        print(f"  Tasks Generated: {summary['tasks_generated']}")

    tasks = result.get("example_tasks", [])
    if tasks:
        print("\n--- Auto-generated Tasks ---")
        for task in tasks:
            print(f"  {task['due_date']}  {task['title']} ({task['task_type']})")

    print("\n" + "=" * 60)


def run_local(args) -> None:
    """Run the import pipeline in-process against the configured database."""
    from app.core.logging import setup_logging
    from app.services.contract_import import import_csv_file
    from app.services.export import import_result_to_csv

    setup_logging()
    result = import_csv_file(args.file)
    if args.summary_csv:
        args.summary_csv.write_text(import_result_to_csv(result), encoding="utf-8")
        print(f"Summary written to {args.summary_csv}")
    elif args.json:
        print(result.model_dump_json(indent=2))
    else:
        print_import_result(result.model_dump(mode="json"))
    sys.exit(0 if result.success else 1)


def main():
    parser = argparse.ArgumentParser(description="Import a contracts CSV via the API")
    parser.add_argument("file", type=Path, help="Path to CSV file")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    parser.add_argument("--summary-csv", type=Path, help="Write the CSV summary to this path")
    parser.add_argument(
        "--local", action="store_true", help="Import directly into DATABASE_URL instead of via the API"
    )
    args = parser.parse_args()

    if not args.file.exists():
        print(f"Error: CSV file not found: {args.file}")
        sys.exit(1)

    if args.local:
        run_local(args)

    with httpx.Client(timeout=120.0) as client:
        readiness = check_readiness(client)
        if "error" in readiness:
            print(f"Error: API is not responding: {readiness['error']}")
            sys.exit(1)
        if readiness.get("status") != "ok":
            print(f"Warning: API reports degraded state: {readiness.get('checks')}")

        try:
            if args.summary_csv:
                resp = upload_csv(client, args.file, fmt="csv")
                args.summary_csv.write_text(resp.text, encoding="utf-8")
                print(f"Summary written to {args.summary_csv}")
                sys.exit(0)
            result = upload_csv(client, args.file).json()
        except httpx.HTTPStatusError as e:
            print(f"Error uploading: {e.response.text}")
            sys.exit(1)

    if args.json:
        print(json.dumps(result, indent=2, default=str))
    else:
        print_import_result(result)

    sys.exit(0 if result.get("success") else 1)


if __name__ == "__main__":
    main()
