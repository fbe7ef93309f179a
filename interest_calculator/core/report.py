"""Display strings for a calculation, in the app's fixed locale."""

from __future__ import annotations

from typing import Optional

from interest_calculator.config import EMPTY_CELL, RATE_DISPLAY_PLACES
from interest_calculator.core.formatting import (
    format_currency,
    format_for_input,
    format_percent,
    format_plain_number,
    format_thousands,
    parse_digits,
)
from interest_calculator.core.periods import PeriodType, rate_per_period
from interest_calculator.schemas.calculator import (
    CalculationDisplay,
    CalculationResult,
    CalculatorForm,
    ComparisonDisplay,
    ResultSummary,
    RowDisplay,
)

COMPOUND_FORMULA = "M = P(1 + r)^n"
SIMPLE_FORMULA = "I = P · r · t, M = P + I"


def rate_hint(rate_percent: float, period_type: PeriodType) -> Optional[str]:
    """Per-period rate shown under the period count; nothing for years."""
    if period_type is PeriodType.MONTHS:
        monthly = rate_per_period(rate_percent, PeriodType.MONTHS)
        return f"Tasa por periodo: {format_plain_number(monthly)}% mensual"
    if period_type is PeriodType.DAYS:
        daily = rate_per_period(rate_percent, PeriodType.DAYS)
        return f"Tasa por periodo: {daily:.{RATE_DISPLAY_PLACES}f}% diaria"
    return None


def formula_line(summary: ResultSummary, compound: bool, has_contribution: bool) -> str:
    unit = summary.working_period_type
    rate = format_percent(summary.rate_per_period)
    if compound:
        return (
            f"{COMPOUND_FORMULA}; r = {rate}% por periodo, "
            f"n = {summary.period_count} {unit.plural}"
        )
    head = SIMPLE_FORMULA + (" + abonos" if has_contribution else "")
    return f"{head}; r = {rate}% por periodo, t = {summary.period_count} {unit.plural}"


def contribution_input(raw: str) -> str:
    # the contribution field stays blank until something is typed
    if raw == "":
        return ""
    return format_thousands(parse_digits(raw))


def _signed_currency(value: float) -> str:
    formatted = format_currency(value)
    return formatted if formatted.startswith("-") else "+" + formatted


def build_display(
    form: CalculatorForm, result: CalculationResult, compound: bool
) -> CalculationDisplay:
    """Format ``result`` for the results summary, table and comparison."""
    calc_input = form.to_input(with_contribution=not compound)
    display = CalculationDisplay(
        principal_input=format_for_input(form.principal),
        contribution_input="" if compound else contribution_input(form.contribution_amount),
        rate_hint=rate_hint(calc_input.annual_rate_percent, form.period_type),
    )
    summary = result.summary
    if summary is None:
        return display

    unit = summary.working_period_type
    display.final_amount = format_currency(summary.final_amount)
    display.total_interest = format_currency(summary.total_interest)
    if result.has_contribution:
        display.total_contributed = format_currency(summary.total_contributed)
    display.formula = formula_line(summary, compound, result.has_contribution)
    display.period_heading = unit.singular
    display.evolution_title = unit.evolution
    display.rows = [
        RowDisplay(
            label=row.label,
            interest=EMPTY_CELL if row.index == 0 else format_currency(row.period_interest),
            value=format_currency(row.accumulated_value),
        )
        for row in result.rows
    ]
    if result.comparison is not None:
        display.comparison = ComparisonDisplay(
            simple=format_currency(result.comparison.simple_final_amount),
            compound=format_currency(result.comparison.compound_final_amount),
            difference=_signed_currency(result.comparison.difference),
        )
    return display
