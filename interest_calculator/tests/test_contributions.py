from __future__ import annotations

from math import isclose

from interest_calculator.core.interest import compute_simple
from interest_calculator.core.periods import PeriodType
from interest_calculator.schemas.calculator import CalculatorInput, Contribution


def monthly_deposit_plan() -> CalculatorInput:
    # 1.000.000 at 12% for one year, adding 100.000 every month
    return CalculatorInput(
        principal=1_000_000,
        annual_rate_percent=12,
        period_type=PeriodType.YEARS,
        period_count=1,
        contribution=Contribution(amount=100_000, every_n=1, unit=PeriodType.MONTHS),
    )


def test_contribution_switches_to_the_finer_unit():
    result = compute_simple(monthly_deposit_plan())
    summary = result.summary

    assert result.has_contribution
    assert summary.working_period_type is PeriodType.MONTHS
    assert summary.period_count == 12
    assert isclose(summary.rate_per_period, 0.01)
    assert isclose(summary.total_interest, 120_000)
    assert isclose(summary.total_contributed, 1_200_000)
    assert isclose(summary.final_amount, 2_320_000)
    assert len(result.rows) == 13
    assert result.rows[-1].label == "Mes 12"


def test_contributions_do_not_earn_interest():
    result = compute_simple(monthly_deposit_plan())

    for row in result.rows[1:]:
        assert isclose(row.period_interest, 10_000)
        assert isclose(row.accumulated_value, 1_000_000 + 110_000 * row.index)


def test_comparison_keeps_contributions_on_the_simple_side_only():
    comparison = compute_simple(monthly_deposit_plan()).comparison

    assert isclose(comparison.simple_final_amount, 2_320_000)
    assert isclose(comparison.compound_final_amount, 1_000_000 * 1.01**12)
    assert comparison.difference < 0


def test_coarser_contribution_unit_keeps_the_period_type():
    calc_input = CalculatorInput(
        principal=1_000_000,
        annual_rate_percent=12,
        period_type=PeriodType.MONTHS,
        period_count=24,
        contribution=Contribution(amount=500_000, every_n=1, unit=PeriodType.YEARS),
    )
    result = compute_simple(calc_input)

    assert result.summary.working_period_type is PeriodType.MONTHS
    assert result.summary.period_count == 24
    assert isclose(result.summary.total_contributed, 1_000_000)
    assert isclose(result.summary.final_amount, 2_240_000)
    assert isclose(result.rows[11].accumulated_value, 1_110_000)
    assert isclose(result.rows[12].accumulated_value, 1_620_000)


def test_weekly_deposits_on_a_daily_grid():
    calc_input = CalculatorInput(
        principal=365_000,
        annual_rate_percent=36.5,
        period_type=PeriodType.MONTHS,
        period_count=1,
        contribution=Contribution(amount=1_000, every_n=7, unit=PeriodType.DAYS),
    )
    result = compute_simple(calc_input)
    summary = result.summary

    assert summary.working_period_type is PeriodType.DAYS
    assert summary.period_count == 30
    assert isclose(summary.total_contributed, 4_000)
    assert isclose(summary.total_interest, 10_950)
    assert isclose(summary.final_amount, 379_950)
    assert result.rows[-1].label == "Día 30"


def test_final_balance_adds_up():
    for every_n, unit in ((1, PeriodType.MONTHS), (2, PeriodType.MONTHS), (10, PeriodType.DAYS)):
        calc_input = CalculatorInput(
            principal=750_000,
            annual_rate_percent=9,
            period_type=PeriodType.YEARS,
            period_count=2,
            contribution=Contribution(amount=25_000, every_n=every_n, unit=unit),
        )
        summary = compute_simple(calc_input).summary
        expected = 750_000 + summary.total_interest + summary.total_contributed

        assert isclose(summary.final_amount, expected)


def test_zero_amount_means_no_contribution():
    calc_input = CalculatorInput(
        principal=1_000_000,
        annual_rate_percent=10,
        period_type=PeriodType.YEARS,
        period_count=3,
        contribution=Contribution(amount=0, every_n=1, unit=PeriodType.DAYS),
    )
    result = compute_simple(calc_input)

    assert not result.has_contribution
    assert result.summary.working_period_type is PeriodType.YEARS
    assert len(result.rows) == 4


def test_working_periods_above_the_limit_give_empty_result():
    # 200 years re-expressed in days is 73,000 working periods
    calc_input = CalculatorInput(
        principal=1_000_000,
        annual_rate_percent=5,
        period_type=PeriodType.YEARS,
        period_count=200,
        contribution=Contribution(amount=1_000, every_n=1, unit=PeriodType.DAYS),
    )
    result = compute_simple(calc_input)

    assert result.is_empty
    assert result.rows == []
    assert result.comparison is None
