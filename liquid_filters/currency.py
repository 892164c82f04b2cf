"""
Locale-aware money filters.

Rules:
- The magnitude is rounded half away from zero to frac_digits places.
- Thousands separators are inserted every three integer digits.
- The sign only selects which convention set (positive/negative) places the
  currency symbol; no minus glyph is emitted.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .errors import InvalidAmount, InvalidConventions
from .locale_source import active_conventions
from .models import LocaleConventions
from .rules import MAX_AMOUNT_EXPONENT, MONEY_ROUNDING

logger = logging.getLogger(__name__)

ConventionsLike = Union[LocaleConventions, Mapping[str, Any]]


def _to_decimal(amount: Any) -> Decimal:
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, float):
        # repr gives the shortest round-tripping form, so 1.005 stays 1.005
        value = Decimal(repr(amount))
    elif isinstance(amount, int):
        value = Decimal(amount)
    else:
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise InvalidAmount(f"Not a number: {amount!r}") from None

    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {amount!r}")
    if value.adjusted() > MAX_AMOUNT_EXPONENT:
        raise InvalidAmount(f"Amount exceeds 10**{MAX_AMOUNT_EXPONENT + 1}: {amount!r}")
    return value


def _coerce_conventions(conventions: Optional[ConventionsLike]) -> LocaleConventions:
    if isinstance(conventions, LocaleConventions):
        return conventions
    if conventions is None:
        raise InvalidConventions("Locale conventions are required")
    try:
        return LocaleConventions.model_validate(conventions)
    except ValidationError as exc:
        raise InvalidConventions(str(exc)) from exc


def _group_thousands(integer: str, sep: str) -> str:
    groups = [integer[max(i - 3, 0):i] for i in range(len(integer), 0, -3)]
    return sep.join(reversed(groups))


def _format_magnitude(value: Decimal, conventions: LocaleConventions) -> str:
    exponent = Decimal(1).scaleb(-conventions.frac_digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + conventions.frac_digits + 2)
        try:
            rounded = abs(value).quantize(exponent, rounding=MONEY_ROUNDING)
        except (Overflow, InvalidOperation) as exc:
            raise InvalidAmount(f"Cannot round {value} to {conventions.frac_digits} places") from exc

    integer, _, fraction = f"{rounded:f}".partition(".")
    formatted = _group_thousands(integer, conventions.thousands_sep)
    if conventions.frac_digits:
        formatted += conventions.decimal_point + fraction
    return formatted


def _place_symbol(formatted: str, negative: bool, conventions: LocaleConventions) -> str:
    if negative:
        precedes = conventions.negative_cs_precedes
        spaced = conventions.negative_sep_by_space
    else:
        precedes = conventions.positive_cs_precedes
        spaced = conventions.positive_sep_by_space

    space = " " if spaced else ""
    if precedes:
        return conventions.currency_symbol + space + formatted
    return formatted + space + conventions.currency_symbol


def format_currency(amount: Any, conventions: ConventionsLike) -> str:
    """
    Render an amount with its currency symbol.

    Raises InvalidConventions for malformed conventions and InvalidAmount for
    non-numeric or non-finite amounts.
    """
    conventions = _coerce_conventions(conventions)
    value = _to_decimal(amount)
    return _place_symbol(_format_magnitude(value, conventions), value < 0, conventions)


def _resolve(conventions: Optional[ConventionsLike]) -> LocaleConventions:
    if conventions is None:
        return active_conventions()
    return _coerce_conventions(conventions)


def money_without_currency(value: Any, conventions: Optional[ConventionsLike] = None) -> str:
    conventions = _resolve(conventions)
    return _format_magnitude(_to_decimal(value), conventions)


def money_with_currency(value: Any, conventions: Optional[ConventionsLike] = None) -> str:
    return format_currency(value, _resolve(conventions))


def money(value: Any, conventions: Optional[ConventionsLike] = None) -> str:
    return money_with_currency(value, conventions)


def money_without_trailing_zeros(value: Any, conventions: Optional[ConventionsLike] = None) -> str:
    """Format an amount given in minor units (cents for frac_digits=2)."""
    conventions = _resolve(conventions)
    amount = _to_decimal(value).scaleb(-conventions.frac_digits)
    logger.debug("Scaled %r minor units to %s", value, amount)
    return format_currency(amount, conventions)
