"""Parsing and fixed-locale display of the calculator's numeric fields."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from interest_calculator.config import (
    CURRENCY_SPACER,
    CURRENCY_SYMBOL,
    RATE_DISPLAY_PLACES,
    THOUSANDS_SEPARATOR,
)

_NON_DIGITS = re.compile(r"[^\d]")
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_digits(text: str) -> int:
    """Keep only the digits of ``text``; nothing left means 0."""
    digits = _NON_DIGITS.sub("", text or "")
    return int(digits) if digits else 0


def parse_number(text: str) -> float:
    """
    Read the leading decimal number of ``text`` the way a browser's
    ``parseFloat`` does. Trailing garbage is ignored; no number at all gives 0.
    """
    match = _LEADING_NUMBER.match(text or "")
    if not match:
        return 0.0
    value = float(match.group(1))
    return value if math.isfinite(value) else 0.0


def round_half_away(value: float) -> int:
    """Round to the nearest unit, ties away from zero."""
    if isinstance(value, int):
        return value
    rounded = int(math.floor(abs(value) + 0.5))
    return -rounded if value < 0 else rounded


def _is_finite(value: float) -> bool:
    # ints of any size are exact
    return isinstance(value, int) or math.isfinite(value)


def format_thousands(value: float) -> str:
    if not _is_finite(value):
        if math.isnan(value):
            return "NaN"
        return "-∞" if value < 0 else "∞"
    rounded = round_half_away(value)
    grouped = f"{abs(rounded):,}".replace(",", THOUSANDS_SEPARATOR)
    return f"-{grouped}" if rounded < 0 else grouped


def format_currency(value: float) -> str:
    """Whole-peso currency string, e.g. ``$ 1.331.000``."""
    if _is_finite(value):
        value = round_half_away(value)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{CURRENCY_SPACER}{format_thousands(abs(value))}"


def format_for_input(raw: str) -> str:
    # a cleared field shows as empty rather than "0"
    value = parse_digits(raw)
    if value == 0:
        return ""
    return format_thousands(value)


def format_percent(rate: float, places: int = RATE_DISPLAY_PLACES) -> str:
    """Fractional ``rate`` as a fixed-decimals percentage without the sign."""
    return f"{rate * 100:.{places}f}"


def format_plain_number(value: float) -> str:
    """
    Shortest round-trip text for ``value``, laid out like JavaScript's
    ``Number#toString``: ``0.00001``, ``1e-7``, ``1e+21``, no trailing ``.0``.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = k + exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        power = n - 1
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + text
