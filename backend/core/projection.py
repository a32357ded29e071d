from __future__ import annotations

import math
from typing import List, Sequence

from pydantic import BaseModel

from backend.logging_config import get_logger

logger = get_logger(__name__)

# Below this magnitude the monthly rate is treated as zero in the closed form.
ZERO_RATE_EPSILON = 1e-12
MONTHS_PER_YEAR = 12


# -----------------------------
# Models
# -----------------------------


class SimulationParameters(BaseModel):
    """The six raw inputs of a projection. Percentages are given as 5 = 5%."""

    initialCapital: float
    monthlyContribution: float
    grossAnnualReturn: float
    annualFee: float
    annualInflation: float
    years: int


class SeriesEntry(BaseModel):
    month: int
    totalContributed: float
    interestAccumulated: float
    totalValue: float


class ProjectionSummary(BaseModel):
    netAnnualRate: float
    monthlyRate: float
    totalMonths: int
    futureValue: float
    futureValueReal: float
    # nominal principal: initial capital plus every monthly contribution
    totalContributed: float
    totalGrowth: float


class ProjectionResult(BaseModel):
    series: List[SeriesEntry]
    summary: ProjectionSummary


# -----------------------------
# Rate conversion
# -----------------------------


def net_annual_return(gross_annual_rate: float, annual_fee_rate: float) -> float:
    """Net annual rate (decimal) after charging the TER against the gross growth factor.

    The fee is a multiplicative haircut, so 5% gross with a 1% fee nets
    1.05 * 0.99 - 1 = 3.95%, not 4%.
    """
    gross_factor = 1 + gross_annual_rate / 100
    fee_factor = 1 - annual_fee_rate / 100
    return gross_factor * fee_factor - 1


def monthly_rate(net_annual_rate: float) -> float:
    """Geometric monthly equivalent of a net annual rate.

    A loss of 100% or more in the year has no real twelfth root, so it maps
    to -1 (the whole balance is lost every month).
    """
    base = 1 + net_annual_rate
    if base <= 0:
        return -1.0
    return base ** (1 / MONTHS_PER_YEAR) - 1


def total_months_for(years: float) -> int:
    return int(round(years * MONTHS_PER_YEAR))


# -----------------------------
# Monthly projection
# -----------------------------


def project_monthly_series(
    initial_capital: float,
    monthly_contribution: float,
    rate: float,
    total_months: int,
) -> List[SeriesEntry]:
    """
    Build the month-by-month balance table.

    Order of operations (per month):
      1) Apply growth to the balance carried from the end of the previous month.
      2) Add the monthly contribution at the END of the month (no growth this month).
      3) Record the row; interest is whatever the balance holds above contributions.

    Starts from initial_capital, which also counts as contributed money.
    """
    balance = float(initial_capital)
    contributed = float(initial_capital)

    rows: List[SeriesEntry] = []
    for month in range(1, total_months + 1):
        if rate != 0:
            balance *= 1 + rate

        balance += monthly_contribution
        contributed += monthly_contribution

        rows.append(
            SeriesEntry(
                month=month,
                totalContributed=contributed,
                interestAccumulated=balance - contributed,
                totalValue=balance,
            )
        )

    return rows


# -----------------------------
# Summary
# -----------------------------


def closed_form_future_value(
    initial_capital: float,
    monthly_contribution: float,
    rate: float,
    total_months: int,
) -> float:
    """Ordinary-annuity future value. Returns inf when the growth factor overflows."""
    if abs(rate) < ZERO_RATE_EPSILON:
        return initial_capital + monthly_contribution * total_months

    try:
        growth_factor = (1 + rate) ** total_months
    except OverflowError:
        return math.inf
    return initial_capital * growth_factor + monthly_contribution * ((growth_factor - 1) / rate)


def summarize_projection(
    initial_capital: float,
    monthly_contribution: float,
    rate: float,
    total_months: int,
    annual_inflation: float,
    years: float,
    series: Sequence[SeriesEntry],
    net_rate: float,
) -> ProjectionSummary:
    """
    Aggregate the final metrics of a projection.

    The final value comes from the closed form; the iterative series is only
    used when the closed form is not a finite number (overflow on extreme
    rates). An empty series falls back to the initial capital.
    """
    future_value = closed_form_future_value(initial_capital, monthly_contribution, rate, total_months)
    if not math.isfinite(future_value):
        future_value = series[-1].totalValue if series else float(initial_capital)

    total_contributions = initial_capital + monthly_contribution * total_months
    total_growth = future_value - total_contributions

    try:
        inflation_factor = (1 + annual_inflation / 100) ** years
    except OverflowError:
        inflation_factor = math.inf
    future_value_real = future_value / inflation_factor if inflation_factor != 0 else future_value

    return ProjectionSummary(
        netAnnualRate=net_rate,
        monthlyRate=rate,
        totalMonths=total_months,
        futureValue=future_value,
        futureValueReal=future_value_real,
        totalContributed=total_contributions,
        totalGrowth=total_growth,
    )


def generate_monthly_series(params: SimulationParameters) -> ProjectionResult:
    """Run the full projection: rates -> monthly series -> summary."""
    net_rate = net_annual_return(params.grossAnnualReturn, params.annualFee)
    rate = monthly_rate(net_rate)
    total_months = total_months_for(params.years)

    series = project_monthly_series(
        initial_capital=params.initialCapital,
        monthly_contribution=params.monthlyContribution,
        rate=rate,
        total_months=total_months,
    )
    summary = summarize_projection(
        initial_capital=params.initialCapital,
        monthly_contribution=params.monthlyContribution,
        rate=rate,
        total_months=total_months,
        annual_inflation=params.annualInflation,
        years=params.years,
        series=series,
        net_rate=net_rate,
    )

    logger.debug(
        "projection computed: months=%d monthly_rate=%.8f future_value=%.2f",
        total_months,
        rate,
        summary.futureValue,
    )
    return ProjectionResult(series=series, summary=summary)


__all__ = [
    "SimulationParameters",
    "SeriesEntry",
    "ProjectionSummary",
    "ProjectionResult",
    "net_annual_return",
    "monthly_rate",
    "total_months_for",
    "project_monthly_series",
    "closed_form_future_value",
    "summarize_projection",
    "generate_monthly_series",
]
