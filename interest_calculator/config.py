"""App-wide configuration for the interest calculator.

Display settings are fixed to a single locale. CORS origins and the log level
can be overridden from the environment.
"""

import os

# =============================================================================
# LOCALE / DISPLAY
# =============================================================================

# All amounts are shown as Colombian pesos with no decimals
LOCALE = "es-CO"
CURRENCY_CODE = "COP"
CURRENCY_SYMBOL = "$"

THOUSANDS_SEPARATOR = "."

# Non-breaking space between the currency symbol and the amount
CURRENCY_SPACER = "\u00a0"

# Decimals shown for per-period rates in the formula line and daily hint
RATE_DISPLAY_PLACES = 4

# Placeholder shown in the interest column of the first table row
EMPTY_CELL = "—"

# =============================================================================
# LIMITS
# =============================================================================

# Longest schedule computed, in working periods (a century of days); longer
# horizons give the empty result
MAX_PERIODS = 36_500

# =============================================================================
# FORM DEFAULTS
# =============================================================================

DEFAULT_PRINCIPAL = "1000000"
DEFAULT_RATE_PERCENT = "10"
DEFAULT_PERIOD_TYPE = "years"
DEFAULT_PERIODS = "3"
DEFAULT_CONTRIBUTION_AMOUNT = ""
DEFAULT_CONTRIBUTION_EVERY = "1"
DEFAULT_CONTRIBUTION_UNIT = "months"

# =============================================================================
# HTTP / LOGGING
# =============================================================================

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "INTEREST_CALC_CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("INTEREST_CALC_LOG_LEVEL", "INFO").upper()
