"""Period units, per-period rates and contribution cadence."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class PeriodType(str, Enum):
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"

    @property
    def rank(self) -> int:
        """Granularity order: the finest unit first."""
        return _RANK[self]

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]

    def is_finer_than(self, other: "PeriodType") -> bool:
        return self.rank < other.rank

    @property
    def singular(self) -> str:
        return _LABELS[self][0]

    @property
    def plural(self) -> str:
        return _LABELS[self][1]

    @property
    def evolution(self) -> str:
        return _LABELS[self][2]


_RANK: Dict[PeriodType, int] = {
    PeriodType.DAYS: 0,
    PeriodType.MONTHS: 1,
    PeriodType.YEARS: 2,
}

_PERIODS_PER_YEAR: Dict[PeriodType, int] = {
    PeriodType.DAYS: 365,
    PeriodType.MONTHS: 12,
    PeriodType.YEARS: 1,
}

# (table heading / row label, plural used in formulas, evolution title)
_LABELS: Dict[PeriodType, tuple[str, str, str]] = {
    PeriodType.DAYS: ("Día", "días", "día a día"),
    PeriodType.MONTHS: ("Mes", "meses", "mes a mes"),
    PeriodType.YEARS: ("Año", "años", "año a año"),
}


def rate_per_period(annual_rate: float, period_type: PeriodType) -> float:
    """Split a fractional annual rate evenly over the periods of one year."""
    return annual_rate / period_type.periods_per_year


def finer_unit(period_type: PeriodType, other: PeriodType) -> PeriodType:
    """Return ``other`` only when it is strictly finer than ``period_type``."""
    if other.is_finer_than(period_type):
        return other
    return period_type


def convert_period_count(count: int, source: PeriodType, target: PeriodType) -> int:
    """Re-express ``count`` periods of ``source`` as whole periods of ``target``."""
    return int(count * (target.periods_per_year / source.periods_per_year))


def contribution_interval(every_n: int, unit: PeriodType, working: PeriodType) -> int:
    """
    Number of working periods between two contributions made "every
    ``every_n`` ``unit``". Ties round up and the interval is at least 1.
    """
    ratio = every_n * working.periods_per_year / unit.periods_per_year
    return max(1, int(ratio + 0.5))


def period_label(period_type: PeriodType, index: int) -> str:
    return f"{period_type.singular} {index}"
