"""Tests for row mapping and validation."""

from datetime import date
from decimal import Decimal

import pytest

from app.services.contract_mapper import map_row, parse_currency, parse_flag, parse_iso_date
from app.services.errors import RowValidationError


def make_row(**overrides):
    row = {
        "client_name": "DCHA",
        "contract_number": "C-1",
        "vendor_name": "Acme Builders",
        "contract_value": "250000",
        "start_date": "2024-03-01",
        "end_date": "2025-02-28",
        "funding_source": "CDBG",
        "section3_applicable": "",
        "title": "Roof Replacement",
        "scope_of_work": "Replace roofs",
        "section3_poc": "Jane Doe",
        "section3_poc_email": "jane@acme.test",
        "section3_poc_phone": "555-0100",
    }
    row.update(overrides)
    return row


@pytest.mark.parametrize("raw", ["$250,000", "250000", "250,000.00", " $ 250,000 "])
def test_parse_currency_variants(raw):
    assert parse_currency(raw) == Decimal("250000")


@pytest.mark.parametrize("raw", ["abc", "$", "N/A", "NaN", "Infinity"])
def test_parse_currency_rejects_non_numeric(raw):
    with pytest.raises(ValueError):
        parse_currency(raw)


@pytest.mark.parametrize("raw", ["1e6", "1E6", "250_000", "2.5e5", "1e999999999", "250000.001"])
def test_parse_currency_rejects_non_plain_amounts(raw):
    with pytest.raises(ValueError, match="invalid currency value"):
        parse_currency(raw)


def test_parse_currency_integer_digit_limit():
    assert parse_currency("$999,999,999,999.99") == Decimal("999999999999.99")
    assert parse_currency("000250000") == Decimal("250000")
    with pytest.raises(ValueError, match="exceeds 12 integer digits"):
        parse_currency("1000000000000")


def test_map_row_rejects_exponent_value():
    with pytest.raises(RowValidationError) as exc_info:
        map_row(make_row(contract_value="1e30"), 4)
    assert exc_info.value.field == "contract_value"
    assert str(exc_info.value).startswith("Row 4: ")


def test_parse_iso_date():
    assert parse_iso_date("2024-03-01") == date(2024, 3, 1)
    assert parse_iso_date("") is None
    with pytest.raises(ValueError):
        parse_iso_date("03/01/2024")
    with pytest.raises(ValueError):
        parse_iso_date("2024-02-30")


@pytest.mark.parametrize(
    "raw,expected",
    [("true", True), ("TRUE", True), ("Yes", True), ("y", True), ("false", False), ("No", False), ("", None)],
)
def test_parse_flag(raw, expected):
    assert parse_flag(raw) is expected


def test_map_row_builds_record():
    record = map_row(make_row(), 1)
    assert record.client_name == "DCHA"
    assert record.contract_value == Decimal("250000")
    assert record.start_date == date(2024, 3, 1)
    assert record.end_date == date(2025, 2, 28)
    assert record.section3_applicable is None
    assert record.title == "Roof Replacement"
    assert record.section3_point_of_contact.email == "jane@acme.test"


def test_map_row_missing_required_field():
    row = make_row(vendor_name="")
    with pytest.raises(RowValidationError) as exc_info:
        map_row(row, 3)
    assert exc_info.value.row_number == 3
    assert exc_info.value.field == "vendor_name"
    assert str(exc_info.value) == "Row 3: missing required field 'vendor_name'"


def test_map_row_absent_field_counts_as_missing():
    row = make_row()
    del row["funding_source"]
    with pytest.raises(RowValidationError) as exc_info:
        map_row(row, 2)
    assert exc_info.value.field == "funding_source"


def test_map_row_multiple_missing_fields_single_error():
    with pytest.raises(RowValidationError) as exc_info:
        map_row(make_row(client_name="", funding_source=""), 5)
    message = str(exc_info.value)
    assert message.startswith("Row 5: ")
    assert "'client_name'" in message and "'funding_source'" in message


def test_map_row_bad_currency():
    with pytest.raises(RowValidationError) as exc_info:
        map_row(make_row(contract_value="TBD"), 4)
    assert exc_info.value.field == "contract_value"


def test_map_row_bad_date():
    with pytest.raises(RowValidationError) as exc_info:
        map_row(make_row(start_date="3/1/2024"), 1)
    assert exc_info.value.field == "start_date"


def test_map_row_bad_flag():
    with pytest.raises(RowValidationError) as exc_info:
        map_row(make_row(section3_applicable="maybe"), 1)
    assert exc_info.value.field == "section3_applicable"


def test_map_row_explicit_flag():
    assert map_row(make_row(section3_applicable="FALSE"), 1).section3_applicable is False


def test_map_row_splits_title_with_colon():
    record = map_row(make_row(title="Roofing: Replace all roofs", scope_of_work=""), 1)
    assert record.title == "Roofing"
    assert record.scope_of_work == "Replace all roofs"


def test_map_row_without_poc():
    record = map_row(make_row(section3_poc="", section3_poc_email="", section3_poc_phone=""), 1)
    assert record.section3_point_of_contact is None
