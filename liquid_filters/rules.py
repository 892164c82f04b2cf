"""
Deterministic filter rules.

This file exists to make the fixed choices explicit and enforceable.
"""

from decimal import ROUND_HALF_UP

HANDLE_SEPARATOR = "-"
PRINTABLE_ASCII = r"\x20-\x7E"

MONEY_ROUNDING = ROUND_HALF_UP  # half away from zero

# Largest accepted decimal exponent of an amount (10 ** 100 and beyond are rejected).
MAX_AMOUNT_EXPONENT = 99

# en_US-equivalent conventions used when no locale data is available.
DEFAULT_LOCALE = {
    "decimal_point": ".",
    "thousands_sep": ",",
    "frac_digits": 2,
    "currency_symbol": "$",
    "positive_cs_precedes": True,
    "negative_cs_precedes": True,
    "positive_sep_by_space": False,
    "negative_sep_by_space": False,
}
