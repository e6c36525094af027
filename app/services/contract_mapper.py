"""Field mapper and validator: parsed CSV row -> ContractRecord."""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from app.schemas.domain import ContractRecord, PointOfContact
from app.services.errors import RowValidationError

REQUIRED_FIELDS = (
    "client_name",
    "contract_number",
    "vendor_name",
    "contract_value",
    "funding_source",
)

_CURRENCY_NOISE = re.compile(r"[$,\s]")
_PLAIN_AMOUNT = re.compile(r"^-?(\d+)(\.\d{1,2})?$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# contracts.contract_value is Numeric(14, 2)
MAX_INTEGER_DIGITS = 12

_TRUE_FLAGS = frozenset({"true", "yes", "y"})
_FALSE_FLAGS = frozenset({"false", "no", "n"})


def parse_currency(raw: str) -> Decimal:
    """Parse a free-form currency string such as ``"$250,000.00"``.

    Only plain amounts are accepted: digits with at most two decimal
    places, no exponents or underscores.

    Raises:
        ValueError: The stripped value is not a plain amount, or it has
            more than ``MAX_INTEGER_DIGITS`` integer digits.
    """
    cleaned = _CURRENCY_NOISE.sub("", raw)
    match = _PLAIN_AMOUNT.match(cleaned)
    if not match:
        raise ValueError(f"invalid currency value {raw!r}")
    if len(match.group(1).lstrip("0")) > MAX_INTEGER_DIGITS:
        raise ValueError(f"currency value {raw!r} exceeds {MAX_INTEGER_DIGITS} integer digits")
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValueError(f"invalid currency value {raw!r}") from exc


def parse_iso_date(raw: str) -> Optional[date]:
    """Parse ``YYYY-MM-DD``; empty input yields ``None``."""
    if not raw:
        return None
    if not _ISO_DATE.match(raw):
        raise ValueError(f"invalid date {raw!r}, expected YYYY-MM-DD")
    return date.fromisoformat(raw)


def parse_flag(raw: str) -> Optional[bool]:
    """Parse an explicit yes/no cell; empty input yields ``None``."""
    value = raw.strip().lower()
    if not value:
        return None
    if value in _TRUE_FLAGS:
        return True
    if value in _FALSE_FLAGS:
        return False
    raise ValueError(f"invalid section3_applicable value {raw!r}")


def _split_title(title: str, scope: str) -> tuple[Optional[str], Optional[str]]:
    # "Title: Scope of Work" exports pack both values into one cell
    if not scope and ":" in title:
        head, _, rest = title.partition(":")
        return head.strip() or None, rest.strip() or None
    return title or None, scope or None


def map_row(row: Mapping[str, str], row_number: int) -> ContractRecord:
    """Validate one parsed row and build a contract candidate.

    ``section3_applicable`` on the returned record holds the explicit row
    value, or ``None`` when the row leaves it blank.

    Raises:
        RowValidationError: A required field is missing, or a value cannot
            be parsed.
    """
    values = {key: (value or "").strip() for key, value in row.items()}

    missing = [name for name in REQUIRED_FIELDS if not values.get(name)]
    if missing:
        if len(missing) == 1:
            message = f"missing required field '{missing[0]}'"
        else:
            message = "missing required fields " + ", ".join(f"'{name}'" for name in missing)
        raise RowValidationError(row_number, missing[0], message)

    try:
        contract_value = parse_currency(values["contract_value"])
    except ValueError as exc:
        raise RowValidationError(row_number, "contract_value", str(exc)) from exc

    dates = {}
    for name in ("start_date", "end_date"):
        try:
            dates[name] = parse_iso_date(values.get(name, ""))
        except ValueError as exc:
            raise RowValidationError(row_number, name, f"{name}: {exc}") from exc

    try:
        explicit = parse_flag(values.get("section3_applicable", ""))
    except ValueError as exc:
        raise RowValidationError(row_number, "section3_applicable", str(exc)) from exc

    title, scope = _split_title(values.get("title", ""), values.get("scope_of_work", ""))

    poc = PointOfContact(
        name=values.get("section3_poc") or None,
        email=values.get("section3_poc_email") or None,
        phone=values.get("section3_poc_phone") or None,
    )

    return ContractRecord(
        client_name=values["client_name"],
        contract_number=values["contract_number"],
        vendor_name=values["vendor_name"],
        contract_value=contract_value,
        start_date=dates["start_date"],
        end_date=dates["end_date"],
        funding_source=values["funding_source"],
        section3_applicable=explicit,
        title=title,
        scope_of_work=scope,
        section3_point_of_contact=poc if (poc.name or poc.email or poc.phone) else None,
    )


__all__ = ["REQUIRED_FIELDS", "map_row", "parse_currency", "parse_flag", "parse_iso_date"]
