"""es-ES presentation of money amounts and the KPI block."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from backend.core.projection import ProjectionSummary

MISSING_VALUE = "—"
# es-ES only groups thousands once the integer part has five digits or more.
MIN_GROUPED_DIGITS = 5


class Kpis(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nominal: str
    real: str
    contributed: str
    growth: str


def format_number(value: float) -> str:
    """Two-decimal es-ES number ("12.345,60"); empty for non-finite values."""
    if not math.isfinite(value):
        return ""

    integer_part, decimal_part = f"{abs(value):,.2f}".split(".")
    digits = integer_part.replace(",", "")
    if len(digits) >= MIN_GROUPED_DIGITS:
        integer_part = integer_part.replace(",", ".")
    else:
        integer_part = digits

    sign = "-" if value < 0 else ""
    return f"{sign}{integer_part},{decimal_part}"


def format_currency(value: float) -> str:
    if not math.isfinite(value):
        return MISSING_VALUE
    return f"{format_number(value)} €"


def build_kpis(summary: ProjectionSummary) -> Kpis:
    return Kpis(
        nominal=format_currency(summary.futureValue),
        real=format_currency(summary.futureValueReal),
        contributed=format_currency(summary.totalContributed),
        growth=format_currency(summary.totalGrowth),
    )
