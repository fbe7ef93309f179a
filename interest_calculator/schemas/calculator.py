"""Data contracts for the simple and compound interest calculators."""

from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from interest_calculator.config import (
    DEFAULT_CONTRIBUTION_AMOUNT,
    DEFAULT_CONTRIBUTION_EVERY,
    DEFAULT_CONTRIBUTION_UNIT,
    DEFAULT_PERIOD_TYPE,
    DEFAULT_PERIODS,
    DEFAULT_PRINCIPAL,
    DEFAULT_RATE_PERCENT,
)
from interest_calculator.core.formatting import (
    format_plain_number,
    parse_digits,
    parse_number,
)
from interest_calculator.core.periods import PeriodType


class Contribution(BaseModel):
    """A fixed amount added every ``every_n`` ``unit``."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(0.0, ge=0)
    every_n: int = Field(1, ge=1)
    unit: PeriodType = PeriodType.MONTHS


class CalculatorInput(BaseModel):
    """Normalized snapshot of the calculator form."""

    model_config = ConfigDict(frozen=True)

    principal: float = 0.0
    annual_rate_percent: float = Field(0.0, ge=0)
    period_type: PeriodType = PeriodType.YEARS
    period_count: int = 0
    contribution: Optional[Contribution] = None

    @property
    def annual_rate(self) -> float:
        return self.annual_rate_percent / 100


class CalculatorForm(BaseModel):
    """
    Raw form fields exactly as typed by the user.

    Numeric fields are free text; anything that does not read as a number is
    treated as 0 by ``to_input``. Only ``period_type`` and ``contribution_unit``
    are validated, since they come from an exclusive selection.
    """

    model_config = ConfigDict(extra="ignore")

    principal: str = DEFAULT_PRINCIPAL
    rate_percent: str = DEFAULT_RATE_PERCENT
    period_type: PeriodType = PeriodType(DEFAULT_PERIOD_TYPE)
    periods: str = DEFAULT_PERIODS
    contribution_amount: str = DEFAULT_CONTRIBUTION_AMOUNT
    contribution_every: str = DEFAULT_CONTRIBUTION_EVERY
    contribution_unit: PeriodType = PeriodType(DEFAULT_CONTRIBUTION_UNIT)

    @field_validator(
        "principal",
        "rate_percent",
        "periods",
        "contribution_amount",
        "contribution_every",
        mode="before",
    )
    @classmethod
    def _stringify(cls, value: object) -> str:
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return format_plain_number(value)
        return str(value)

    def to_input(self, with_contribution: bool = True) -> CalculatorInput:
        """Normalize the raw fields; invalid numbers become 0."""
        principal = _parse_amount(self.principal)
        rate_percent = max(parse_number(self.rate_percent), 0.0)
        period_count = math.floor(parse_number(self.periods))

        contribution = None
        if with_contribution:
            amount = _parse_amount(self.contribution_amount)
            every_n = max(1, math.floor(parse_number(self.contribution_every) or 1))
            if amount > 0:
                contribution = Contribution(
                    amount=amount,
                    every_n=every_n,
                    unit=self.contribution_unit,
                )

        return CalculatorInput(
            principal=principal,
            annual_rate_percent=rate_percent,
            period_type=self.period_type,
            period_count=period_count,
            contribution=contribution,
        )


def _parse_amount(raw: str) -> float:
    # grouped digits first, then a plain decimal, then nothing
    try:
        amount = float(parse_digits(raw))
    except OverflowError:
        return 0.0
    return amount or max(parse_number(raw), 0.0)


class PeriodRow(BaseModel):
    """Single row of the period-by-period table."""

    index: int = Field(..., ge=0)
    label: str
    accumulated_value: float
    period_interest: float


class ChartPoint(BaseModel):
    """Point of the growth chart, rounded to whole units; None past the float range."""

    label: str
    value: Optional[int]
    interest: Optional[int]


class ResultSummary(BaseModel):
    final_amount: float
    total_interest: float
    rate_per_period: float
    period_count: int
    total_contributed: float = 0.0
    working_period_type: PeriodType


class ComparisonResult(BaseModel):
    simple_final_amount: float
    compound_final_amount: float
    difference: float


class CalculationResult(BaseModel):
    """Everything the presentation layer renders for one form snapshot."""

    summary: Optional[ResultSummary] = None
    rows: List[PeriodRow] = Field(default_factory=list)
    chart: List[ChartPoint] = Field(default_factory=list)
    comparison: Optional[ComparisonResult] = None
    has_contribution: bool = False

    @property
    def is_empty(self) -> bool:
        return self.summary is None


class ComparisonDisplay(BaseModel):
    simple: str
    compound: str
    difference: str


class RowDisplay(BaseModel):
    label: str
    interest: str
    value: str


class CalculationDisplay(BaseModel):
    """Fixed-locale strings for the results area."""

    principal_input: str
    contribution_input: str
    rate_hint: Optional[str] = None
    final_amount: Optional[str] = None
    total_interest: Optional[str] = None
    total_contributed: Optional[str] = None
    formula: Optional[str] = None
    period_heading: Optional[str] = None
    evolution_title: Optional[str] = None
    rows: List[RowDisplay] = Field(default_factory=list)
    comparison: Optional[ComparisonDisplay] = None


class CalculationResponse(BaseModel):
    model_config = ConfigDict(ser_json_inf_nan="null")

    result: CalculationResult
    display: CalculationDisplay


class FormatInputRequest(BaseModel):
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> str:
        if value is None:
            return ""
        return str(value)


class FormatInputResponse(BaseModel):
    value: int
    display: str
