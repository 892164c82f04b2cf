"""
Supplies LocaleConventions from the system locale.

setlocale() mutates process-wide state, so every read happens under a lock and
the previous LC_NUMERIC / LC_MONETARY settings are restored afterwards.
"""

from __future__ import annotations

import locale
import logging
import threading
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from . import config
from .errors import InvalidConventions
from .models import LocaleConventions
from .rules import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

DEFAULT_CONVENTIONS = LocaleConventions(**DEFAULT_LOCALE)

_CATEGORIES = (locale.LC_NUMERIC, locale.LC_MONETARY)
_FLAGS = ("p_cs_precedes", "n_cs_precedes", "p_sep_by_space", "n_sep_by_space")

_setlocale_lock = threading.Lock()
_active_lock = threading.Lock()
_active: Optional[LocaleConventions] = None


def conventions_from_localeconv(info: Mapping[str, Any]) -> LocaleConventions:
    """
    Map a locale.localeconv() dict to LocaleConventions.

    - frac_digits == CHAR_MAX (C/POSIX locale) means no monetary data: use the default.
    - sep_by_space == 2 separates sign and symbol, not symbol and value: no space.
    """
    if info.get("frac_digits", locale.CHAR_MAX) == locale.CHAR_MAX:
        return DEFAULT_CONVENTIONS

    data = dict(info)
    for key in _FLAGS:
        if key in data:
            data[key] = data[key] == 1

    try:
        return LocaleConventions.model_validate(data)
    except ValidationError as exc:
        raise InvalidConventions(str(exc)) from exc


def load_conventions(locale_name: Optional[str] = None) -> LocaleConventions:
    """Snapshot the conventions of a locale without leaving it active."""
    if locale_name is None:
        locale_name = config.locale_name()

    with _setlocale_lock:
        saved = [(category, locale.setlocale(category)) for category in _CATEGORIES]
        try:
            for category in _CATEGORIES:
                locale.setlocale(category, locale_name)
            info = locale.localeconv()
        except locale.Error:
            logger.warning(
                "Locale %r is not available, using default conventions", locale_name
            )
            return DEFAULT_CONVENTIONS
        finally:
            for category, value in saved:
                locale.setlocale(category, value)

    conventions = conventions_from_localeconv(info)
    logger.info("Loaded conventions for locale %r: %s", locale_name, conventions)
    return conventions


def active_conventions() -> LocaleConventions:
    global _active
    with _active_lock:
        if _active is None:
            _active = load_conventions()
        return _active


def reset_conventions() -> None:
    """Drop the cached snapshot; the next lookup reloads it (call after a locale change)."""
    global _active
    with _active_lock:
        _active = None
