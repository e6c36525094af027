"""Tests for Section 3 applicability and benchmarks."""

from decimal import Decimal

import pytest

from app.services.applicability import (
    LABOR_HOUR_BENCHMARK,
    SECTION3_THRESHOLD,
    TARGETED_SECTION3_BENCHMARK,
    determine_applicability,
)


def test_threshold_constants():
    assert SECTION3_THRESHOLD == Decimal("200000")
    assert LABOR_HOUR_BENCHMARK == 25
    assert TARGETED_SECTION3_BENCHMARK == 5


@pytest.mark.parametrize("value", ["200000", "200000.01", "5000000"])
def test_at_or_above_threshold_applies(value):
    result = determine_applicability(Decimal(value))
    assert result.is_applicable is True
    assert result.explicit is False
    assert result.subpart == "Subpart B"
    assert result.labor_hour_benchmark == LABOR_HOUR_BENCHMARK
    assert result.targeted_benchmark == TARGETED_SECTION3_BENCHMARK
    assert "Section 3 applies" in result.reason


@pytest.mark.parametrize("value", ["0", "15000", "199999.99"])
def test_below_threshold_does_not_apply(value):
    result = determine_applicability(Decimal(value))
    assert result.is_applicable is False
    assert result.subpart == "N/A"
    assert result.labor_hour_benchmark == 0
    assert result.targeted_benchmark == 0
    assert "does not apply" in result.reason


def test_explicit_false_overrides_threshold():
    result = determine_applicability(Decimal("5000000"), explicit=False)
    assert result.is_applicable is False
    assert result.explicit is True
    assert result.labor_hour_benchmark == 0


def test_explicit_true_applies_below_threshold():
    result = determine_applicability(Decimal("5000"), explicit=True)
    assert result.is_applicable is True
    assert result.subpart == "Subpart B"
    assert result.labor_hour_benchmark == LABOR_HOUR_BENCHMARK
