from __future__ import annotations

import math
from math import isclose

from interest_calculator.config import MAX_PERIODS
from interest_calculator.core.interest import compute_compound, compute_simple
from interest_calculator.core.periods import PeriodType
from interest_calculator.schemas.calculator import CalculatorInput


def test_three_years_at_ten_percent():
    calc_input = CalculatorInput(
        principal=1_000_000,
        annual_rate_percent=10,
        period_type=PeriodType.YEARS,
        period_count=3,
    )
    result = compute_simple(calc_input)

    assert isclose(result.summary.final_amount, 1_300_000)
    assert isclose(result.summary.total_interest, 300_000)
    assert result.summary.working_period_type is PeriodType.YEARS
    assert isclose(result.comparison.simple_final_amount, 1_300_000)
    assert isclose(result.comparison.difference, 31_000, abs_tol=1e-6)


def test_interest_is_linear_in_periods():
    """
    Interest accrues on the original principal only, so every period adds the same amount.
    """
    calc_input = CalculatorInput(
        principal=200_000,
        annual_rate_percent=12,
        period_type=PeriodType.MONTHS,
        period_count=10,
    )
    result = compute_simple(calc_input)

    assert len(result.rows) == 11
    assert result.rows[0].accumulated_value == 200_000
    assert result.rows[0].period_interest == 0.0
    for row in result.rows[1:]:
        assert isclose(row.period_interest, 2_000)
        assert isclose(row.accumulated_value, 200_000 + 2_000 * row.index)
    assert isclose(result.summary.total_interest, 20_000)
    assert result.chart[-1].interest == 20_000


def test_compound_never_falls_behind_simple():
    for rate in (0, 1, 5, 25):
        for periods in (1, 2, 12, 40):
            calc_input = CalculatorInput(
                principal=50_000,
                annual_rate_percent=rate,
                period_type=PeriodType.YEARS,
                period_count=periods,
            )
            simple = compute_simple(calc_input).summary.final_amount
            compound = compute_compound(calc_input).summary.final_amount
            if rate == 0 or periods == 1:
                assert isclose(compound, simple)
            else:
                assert compound > simple


def test_zero_principal_or_periods_gives_empty_result():
    for principal, periods in ((0, 3), (1_000, 0)):
        result = compute_simple(
            CalculatorInput(
                principal=principal,
                annual_rate_percent=10,
                period_type=PeriodType.YEARS,
                period_count=periods,
            )
        )
        assert result.is_empty
        assert result.rows == []
        assert result.chart == []
        assert result.comparison is None


def test_long_horizon_compares_against_an_infinite_compound_amount():
    calc_input = CalculatorInput(
        principal=1_000_000,
        annual_rate_percent=10,
        period_type=PeriodType.YEARS,
        period_count=8000,
    )
    result = compute_simple(calc_input)

    assert isclose(result.summary.final_amount, 801_000_000)
    assert result.comparison.compound_final_amount == math.inf
    assert result.comparison.difference == math.inf
    assert result.chart[-1].value == 801_000_000


def test_period_count_above_the_limit_gives_empty_result():
    calc_input = CalculatorInput(
        principal=1_000_000,
        annual_rate_percent=0,
        period_type=PeriodType.DAYS,
        period_count=MAX_PERIODS + 1,
    )

    assert compute_simple(calc_input).is_empty
