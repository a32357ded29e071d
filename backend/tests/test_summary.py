from __future__ import annotations

import math
from math import isclose

from backend.core.projection import (
    SeriesEntry,
    SimulationParameters,
    closed_form_future_value,
    generate_monthly_series,
    summarize_projection,
)


def params(**overrides) -> SimulationParameters:
    values = dict(
        initialCapital=1000.0,
        monthlyContribution=100.0,
        grossAnnualReturn=0.0,
        annualFee=0.0,
        annualInflation=0.0,
        years=2,
    )
    values.update(overrides)
    return SimulationParameters(**values)


def test_zero_rate_future_value_is_sum_of_contributions():
    result = generate_monthly_series(params())

    assert result.summary.monthlyRate == 0.0
    assert result.summary.totalMonths == 24
    assert result.summary.futureValue == 1000 + 100 * 24
    assert result.summary.totalGrowth == 0.0


def test_one_year_gives_twelve_entries():
    result = generate_monthly_series(
        params(initialCapital=0.0, monthlyContribution=200.0, grossAnnualReturn=6.0, years=1)
    )

    assert result.summary.totalMonths == 12
    assert len(result.series) == 12
    assert result.series[0].totalContributed == 200.0


def test_thirty_years_gives_360_months():
    result = generate_monthly_series(
        params(monthlyContribution=50.0, grossAnnualReturn=5.0, annualFee=0.5, annualInflation=2.0, years=30)
    )

    assert result.summary.totalMonths == 360
    assert len(result.series) == 360


def test_without_contributions_total_contributed_is_initial_capital():
    result = generate_monthly_series(
        params(
            initialCapital=5000.0,
            monthlyContribution=0.0,
            grossAnnualReturn=6.0,
            annualFee=0.5,
            annualInflation=1.5,
            years=10,
        )
    )

    assert isclose(result.summary.totalContributed, 5000.0, abs_tol=1e-6)


def test_inflation_makes_real_value_smaller_than_nominal():
    result = generate_monthly_series(
        params(monthlyContribution=200.0, grossAnnualReturn=5.0, annualFee=0.5, annualInflation=15.0, years=5)
    )

    assert result.summary.futureValueReal < result.summary.futureValue
    expected_real = result.summary.futureValue / (1.15 ** 5)
    assert isclose(result.summary.futureValueReal, expected_real, rel_tol=1e-12)


def test_zero_inflation_keeps_real_equal_to_nominal():
    result = generate_monthly_series(params(grossAnnualReturn=7.0, years=10))

    assert result.summary.futureValueReal == result.summary.futureValue


def test_closed_form_agrees_with_iterative_tail():
    for gross, fee, years in [(5.0, 0.5, 30), (12.0, 1.0, 50), (-8.0, 0.2, 20), (3.0, 0.0, 1)]:
        result = generate_monthly_series(
            params(initialCapital=2500.0, monthlyContribution=300.0, grossAnnualReturn=gross, annualFee=fee, years=years)
        )
        assert isclose(result.summary.futureValue, result.series[-1].totalValue, rel_tol=1e-6)


def test_growth_is_future_value_minus_principal():
    result = generate_monthly_series(params(grossAnnualReturn=8.0, annualFee=0.3, years=15))

    summary = result.summary
    assert summary.totalContributed == 1000.0 + 100.0 * 180
    assert isclose(summary.totalGrowth, summary.futureValue - summary.totalContributed, abs_tol=1e-9)
    assert summary.totalGrowth > 0


def test_net_and_monthly_rates_are_reported():
    result = generate_monthly_series(params(grossAnnualReturn=5.0, annualFee=1.0))

    assert isclose(result.summary.netAnnualRate, 0.0395, abs_tol=1e-12)
    assert isclose((1 + result.summary.monthlyRate) ** 12, 1.0395, rel_tol=1e-12)


def test_total_loss_scenario_ends_with_last_contribution():
    result = generate_monthly_series(params(initialCapital=10000.0, grossAnnualReturn=-100.0, years=3))

    assert result.summary.monthlyRate == -1.0
    assert isclose(result.summary.futureValue, 100.0, abs_tol=1e-9)
    assert result.series[-1].totalValue == 100.0


def test_overflowing_closed_form_falls_back_to_series_tail():
    rate = 10.0
    series = [SeriesEntry(month=1, totalContributed=1.0, interestAccumulated=41.0, totalValue=42.0)]

    assert math.isinf(closed_form_future_value(1.0, 1.0, rate, 10_000))
    summary = summarize_projection(1.0, 1.0, rate, 10_000, 0.0, 1, series, net_rate=0.0)
    assert summary.futureValue == 42.0


def test_empty_series_falls_back_to_initial_capital():
    summary = summarize_projection(750.0, 1.0, 10.0, 10_000, 0.0, 1, [], net_rate=0.0)

    assert summary.futureValue == 750.0


def test_zero_months_summary_is_initial_capital():
    summary = summarize_projection(750.0, 50.0, 0.004, 0, 2.0, 0, [], net_rate=0.05)

    assert summary.futureValue == 750.0
    assert summary.totalContributed == 750.0
    assert summary.futureValueReal == 750.0
