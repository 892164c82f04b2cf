from .currency import (
    format_currency,
    money,
    money_with_currency,
    money_without_currency,
    money_without_trailing_zeros,
)
from .errors import FilterError, InvalidAmount, InvalidConventions
from .models import LocaleConventions
from .slug import handle, handleize

__all__ = [
    "FilterError",
    "InvalidAmount",
    "InvalidConventions",
    "LocaleConventions",
    "format_currency",
    "handle",
    "handleize",
    "money",
    "money_with_currency",
    "money_without_currency",
    "money_without_trailing_zeros",
]
