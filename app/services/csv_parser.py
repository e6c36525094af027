"""Row parser for contract CSV files.

Pure functions over the decoded text of an uploaded file. The first
non-blank line is the header; every other non-blank line is a data row.
"""

from __future__ import annotations

import csv
import enum
import io
import logging
import re

from app.services.errors import EmptyInputError

logger = logging.getLogger(__name__)


class QuoteMode(str, enum.Enum):
    """How cells are split out of a line.

    ``strip`` splits on every comma and strips surrounding quotes, so a
    quoted cell containing a comma is broken in two. ``rfc4180`` honors
    quoted fields (including embedded commas and newlines).
    """

    strip = "strip"
    rfc4180 = "rfc4180"


# Alternate header spellings seen in agency exports, keyed by the header
# lowercased with everything except letters and digits removed.
HEADER_ALIASES: dict[str, str] = {
    "clientname": "client_name",
    "client": "client_name",
    "contractnumber": "contract_number",
    "contract": "contract_number",
    "vendorname": "vendor_name",
    "vendername": "vendor_name",
    "vendor": "vendor_name",
    "contractvalue": "contract_value",
    "value": "contract_value",
    "startdate": "start_date",
    "contractstartdate": "start_date",
    "start": "start_date",
    "enddate": "end_date",
    "contractenddate": "end_date",
    "end": "end_date",
    "fundingsource": "funding_source",
    "funding": "funding_source",
    "section3applicable": "section3_applicable",
    "section3applicableyn": "section3_applicable",
    "title": "title",
    "scopeofwork": "scope_of_work",
    "titlescopeofwork": "title",
    "section3poc": "section3_poc",
    "section3pocemail": "section3_poc_email",
    "section3pocphone": "section3_poc_phone",
}

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_header(header: str) -> str:
    """Map a header cell to its canonical field name.

    Unknown headers are returned stripped but otherwise unchanged.
    """
    cleaned = header.strip().strip('"').strip()
    key = _NON_ALNUM.sub("", cleaned.lower())
    return HEADER_ALIASES.get(key, cleaned)


def _split_stripped(line: str) -> list[str]:
    return [cell.strip().strip('"').strip() for cell in line.split(",")]


def _iter_cells(text: str, quoting: QuoteMode) -> list[list[str]]:
    if quoting is QuoteMode.rfc4180:
        reader = csv.reader(io.StringIO(text), skipinitialspace=True)
        return [
            [cell.strip() for cell in cells]
            for cells in reader
            if any(cell.strip() for cell in cells)
        ]
    return [_split_stripped(line) for line in text.splitlines() if line.strip()]


def parse_rows(text: str, *, quoting: QuoteMode | str = QuoteMode.strip) -> list[dict[str, str]]:
    """Parse CSV text into field-keyed rows in input order.

    Args:
        text: Full decoded content of the file.
        quoting: Cell splitting mode, see :class:`QuoteMode`.

    Returns:
        One mapping per data row. Rows shorter than the header simply
        lack the trailing fields; cells beyond the header are dropped.

    Raises:
        EmptyInputError: The text is empty or whitespace only.
    """
    quoting = QuoteMode(quoting)
    text = text.lstrip("\ufeff")
    if not text.strip():
        raise EmptyInputError("CSV file is empty")

    lines = _iter_cells(text, quoting)
    if not lines:
        raise EmptyInputError("CSV file has no header row")
    header = [normalize_header(cell) for cell in lines[0]]
    logger.debug("CSV header: %s", header)

    return [dict(zip(header, cells)) for cells in lines[1:]]


__all__ = ["HEADER_ALIASES", "QuoteMode", "normalize_header", "parse_rows"]
