"""Simple and compound interest schedules."""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Optional, Tuple

from interest_calculator.config import MAX_PERIODS
from interest_calculator.core.formatting import round_half_away
from interest_calculator.core.periods import (
    PeriodType,
    contribution_interval,
    convert_period_count,
    finer_unit,
    period_label,
    rate_per_period,
)
from interest_calculator.schemas.calculator import (
    CalculationResult,
    CalculatorInput,
    ChartPoint,
    ComparisonResult,
    PeriodRow,
    ResultSummary,
)

logger = logging.getLogger(__name__)


def compound_amount(principal: float, rate: float, periods: int) -> float:
    """M = P(1 + r)^n, infinite once it leaves the float range."""
    try:
        return principal * (1 + rate) ** periods
    except OverflowError:
        return math.inf


def simple_amount(principal: float, rate: float, periods: int) -> float:
    """M = P + P·r·n"""
    return principal + principal * rate * periods


def compound_values(principal: float, rate: float, periods: int) -> Iterator[float]:
    """Yield P(1 + r)^i for i = 0..periods; call again to restart."""
    for i in range(periods + 1):
        yield compound_amount(principal, rate, i)


def compare(
    principal: float,
    rate: float,
    periods: int,
    simple_final: Optional[float] = None,
) -> Optional[ComparisonResult]:
    """
    Simple vs. compound final amounts for identical parameters.

    ``simple_final`` replaces the plain simple-interest amount, e.g. with a
    balance that includes contributions; the compound side never has them.
    """
    if periods <= 0:
        return None
    simple = simple_amount(principal, rate, periods) if simple_final is None else simple_final
    compound = compound_amount(principal, rate, periods)
    return ComparisonResult(
        simple_final_amount=simple,
        compound_final_amount=compound,
        difference=compound - simple,
    )


def _is_empty(calc_input: CalculatorInput) -> bool:
    return (
        calc_input.principal <= 0
        or calc_input.period_count <= 0
        or calc_input.period_count > MAX_PERIODS
    )


def _growth(current: float, previous: float) -> float:
    if math.isinf(current):
        return current
    return current - previous


def _whole_units(value: float) -> Optional[int]:
    return round_half_away(value) if math.isfinite(value) else None


def _build_rows(
    values: List[float],
    interests: List[float],
    period_type: PeriodType,
) -> Tuple[List[PeriodRow], List[ChartPoint]]:
    rows: List[PeriodRow] = []
    chart: List[ChartPoint] = []
    accrued = 0.0
    for index, (value, interest) in enumerate(zip(values, interests)):
        label = period_label(period_type, index)
        accrued += interest
        rows.append(
            PeriodRow(
                index=index,
                label=label,
                accumulated_value=value,
                period_interest=interest,
            )
        )
        chart.append(
            ChartPoint(
                label=label,
                value=_whole_units(value),
                interest=_whole_units(accrued),
            )
        )
    return rows, chart


def compute_compound(calc_input: CalculatorInput) -> CalculationResult:
    """
    Compound interest over ``period_count`` periods of ``period_type``.

    Returns the empty result when the principal or the period count is not
    positive, or the period count is above ``MAX_PERIODS``. The chart's
    interest series is the interest accrued to date.
    """
    if _is_empty(calc_input):
        logger.debug("compound: empty result for %s", calc_input)
        return CalculationResult()

    principal = calc_input.principal
    periods = calc_input.period_count
    rate = rate_per_period(calc_input.annual_rate, calc_input.period_type)

    values = list(compound_values(principal, rate, periods))
    interests = [0.0] + [_growth(values[i], values[i - 1]) for i in range(1, len(values))]
    rows, chart = _build_rows(values, interests, calc_input.period_type)

    final_amount = compound_amount(principal, rate, periods)
    summary = ResultSummary(
        final_amount=final_amount,
        total_interest=final_amount - principal,
        rate_per_period=rate,
        period_count=periods,
        working_period_type=calc_input.period_type,
    )
    logger.debug(
        "compound: P=%s r=%s n=%s -> M=%s", principal, rate, periods, final_amount
    )
    return CalculationResult(
        summary=summary,
        rows=rows,
        chart=chart,
        comparison=compare(principal, rate, periods),
    )


def compute_simple(calc_input: CalculatorInput) -> CalculationResult:
    """
    Simple interest, optionally with a periodic contribution.

    Interest always accrues on the original principal. With a contribution the
    schedule runs on the finer of the period unit and the contribution unit,
    and contributions themselves never earn interest.
    """
    if _is_empty(calc_input):
        logger.debug("simple: empty result for %s", calc_input)
        return CalculationResult()

    contribution = calc_input.contribution
    if contribution is None or contribution.amount <= 0:
        return _simple_without_contribution(calc_input)
    return _simple_with_contribution(calc_input)


def _simple_without_contribution(calc_input: CalculatorInput) -> CalculationResult:
    principal = calc_input.principal
    periods = calc_input.period_count
    rate = rate_per_period(calc_input.annual_rate, calc_input.period_type)
    interest_per_period = principal * rate

    values = [principal + interest_per_period * i for i in range(periods + 1)]
    interests = [0.0] + [interest_per_period] * periods
    rows, chart = _build_rows(values, interests, calc_input.period_type)

    total_interest = principal * rate * periods
    summary = ResultSummary(
        final_amount=principal + total_interest,
        total_interest=total_interest,
        rate_per_period=rate,
        period_count=periods,
        working_period_type=calc_input.period_type,
    )
    logger.debug(
        "simple: P=%s r=%s n=%s -> M=%s", principal, rate, periods, summary.final_amount
    )
    return CalculationResult(
        summary=summary,
        rows=rows,
        chart=chart,
        comparison=compare(principal, rate, periods),
    )


def _simple_with_contribution(calc_input: CalculatorInput) -> CalculationResult:
    contribution = calc_input.contribution
    principal = calc_input.principal

    working = finer_unit(calc_input.period_type, contribution.unit)
    periods = convert_period_count(calc_input.period_count, calc_input.period_type, working)
    if periods > MAX_PERIODS:
        logger.debug(
            "simple+contribution: %s %s exceed the limit", periods, working.value
        )
        return CalculationResult()
    rate = rate_per_period(calc_input.annual_rate, working)
    interval = contribution_interval(contribution.every_n, contribution.unit, working)
    interest_per_period = principal * rate

    balance = principal
    values = [balance]
    for i in range(1, periods + 1):
        balance += interest_per_period
        if i % interval == 0:
            balance += contribution.amount
        values.append(balance)
    interests = [0.0] + [interest_per_period] * periods
    rows, chart = _build_rows(values, interests, working)

    total_contributed = contribution.amount * (periods // interval)
    summary = ResultSummary(
        final_amount=balance,
        total_interest=principal * rate * periods,
        rate_per_period=rate,
        period_count=periods,
        total_contributed=total_contributed,
        working_period_type=working,
    )
    logger.debug(
        "simple+contribution: P=%s r=%s n=%s interval=%s -> M=%s",
        principal,
        rate,
        periods,
        interval,
        balance,
    )
    return CalculationResult(
        summary=summary,
        rows=rows,
        chart=chart,
        comparison=compare(principal, rate, periods, simple_final=balance),
        has_contribution=True,
    )


def compute(calc_input: CalculatorInput, compound: bool) -> CalculationResult:
    """Recompute the whole result set for one form snapshot."""
    if compound:
        return compute_compound(calc_input)
    return compute_simple(calc_input)
