"""Section 3 applicability and benchmark calculation (24 CFR Part 75, Subpart B)."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from app.schemas.domain import Section3Applicability

# Policy constants. A change in HUD policy is a one-line edit here.
SECTION3_THRESHOLD = Decimal("200000")
SECTION3_SUBPART = "Subpart B"
LABOR_HOUR_BENCHMARK = 25  # % of total labor hours by Section 3 workers
TARGETED_SECTION3_BENCHMARK = 5  # % of total labor hours by targeted Section 3 workers


def _money(value: Decimal) -> str:
    return f"${value:,.0f}"


def determine_applicability(
    contract_value: Decimal,
    explicit: Optional[bool] = None,
) -> Section3Applicability:
    """Decide whether Section 3 applies and attach the benchmarks.

    An explicit row value always wins; otherwise the contract value is
    compared against ``SECTION3_THRESHOLD``.
    """
    if explicit is not None:
        is_applicable = explicit
        reason = (
            "Section 3 applicability set explicitly on import "
            f"({'applicable' if explicit else 'not applicable'})."
        )
    else:
        is_applicable = contract_value >= SECTION3_THRESHOLD
        if is_applicable:
            reason = (
                f"Section 3 applies: contract value ({_money(contract_value)}) meets the "
                f"{SECTION3_SUBPART} threshold ({_money(SECTION3_THRESHOLD)}). "
                f"Required labor hour benchmark: {LABOR_HOUR_BENCHMARK}% Section 3 workers, "
                f"{TARGETED_SECTION3_BENCHMARK}% targeted Section 3 workers."
            )
        else:
            reason = (
                f"Section 3 does not apply: contract value ({_money(contract_value)}) is below "
                f"the {SECTION3_SUBPART} threshold ({_money(SECTION3_THRESHOLD)})."
            )

    return Section3Applicability(
        is_applicable=is_applicable,
        explicit=explicit is not None,
        subpart=SECTION3_SUBPART if is_applicable else "N/A",
        threshold=SECTION3_THRESHOLD,
        labor_hour_benchmark=LABOR_HOUR_BENCHMARK if is_applicable else 0,
        targeted_benchmark=TARGETED_SECTION3_BENCHMARK if is_applicable else 0,
        reason=reason,
    )


__all__ = [
    "LABOR_HOUR_BENCHMARK",
    "SECTION3_SUBPART",
    "SECTION3_THRESHOLD",
    "TARGETED_SECTION3_BENCHMARK",
    "determine_applicability",
]
