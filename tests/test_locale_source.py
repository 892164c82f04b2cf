import locale

import pytest

from liquid_filters import InvalidConventions, locale_source
from liquid_filters.locale_source import (
    DEFAULT_CONVENTIONS,
    active_conventions,
    conventions_from_localeconv,
    load_conventions,
    reset_conventions,
)

FR_LOCALECONV = {
    "int_curr_symbol": "EUR ",
    "currency_symbol": "€",
    "mon_decimal_point": ",",
    "mon_thousands_sep": " ",
    "decimal_point": ",",
    "thousands_sep": " ",
    "frac_digits": 2,
    "int_frac_digits": 2,
    "p_cs_precedes": 0,
    "n_cs_precedes": 0,
    "p_sep_by_space": 1,
    "n_sep_by_space": 1,
    "p_sign_posn": 1,
    "n_sign_posn": 1,
    "grouping": [3, 0],
}


@pytest.fixture(autouse=True)
def fresh_snapshot():
    reset_conventions()
    yield
    reset_conventions()


def test_default_conventions_are_en_us():
    assert DEFAULT_CONVENTIONS.decimal_point == "."
    assert DEFAULT_CONVENTIONS.thousands_sep == ","
    assert DEFAULT_CONVENTIONS.currency_symbol == "$"
    assert DEFAULT_CONVENTIONS.frac_digits == 2
    assert DEFAULT_CONVENTIONS.positive_cs_precedes is True
    assert DEFAULT_CONVENTIONS.positive_sep_by_space is False


def test_localeconv_mapping():
    conventions = conventions_from_localeconv(FR_LOCALECONV)
    assert conventions.decimal_point == ","
    assert conventions.thousands_sep == " "
    assert conventions.currency_symbol == "€"
    assert conventions.positive_cs_precedes is False
    assert conventions.negative_sep_by_space is True


def test_sep_by_space_two_means_no_space():
    conventions = conventions_from_localeconv(dict(FR_LOCALECONV, n_sep_by_space=2))
    assert conventions.negative_sep_by_space is False


def test_c_locale_falls_back_to_default():
    info = dict(FR_LOCALECONV, frac_digits=locale.CHAR_MAX, currency_symbol="")
    assert conventions_from_localeconv(info) is DEFAULT_CONVENTIONS


def test_malformed_localeconv_raises():
    with pytest.raises(InvalidConventions):
        conventions_from_localeconv(dict(FR_LOCALECONV, frac_digits=-2))


def test_load_c_locale():
    assert load_conventions("C") == DEFAULT_CONVENTIONS


def test_unknown_locale_falls_back_and_restores_state():
    before = (locale.setlocale(locale.LC_NUMERIC), locale.setlocale(locale.LC_MONETARY))
    assert load_conventions("xx_NOT_A_LOCALE.UTF-8") is DEFAULT_CONVENTIONS
    after = (locale.setlocale(locale.LC_NUMERIC), locale.setlocale(locale.LC_MONETARY))
    assert before == after


def test_configured_locale_is_used(monkeypatch):
    monkeypatch.setenv("LIQUID_FILTERS_LOCALE", "xx_NOT_A_LOCALE.UTF-8")
    assert load_conventions() is DEFAULT_CONVENTIONS


def test_active_conventions_are_cached_until_reset(monkeypatch):
    calls = []

    def fake_load(locale_name=None):
        calls.append(locale_name)
        return DEFAULT_CONVENTIONS

    monkeypatch.setattr(locale_source, "load_conventions", fake_load)

    assert active_conventions() is DEFAULT_CONVENTIONS
    assert active_conventions() is DEFAULT_CONVENTIONS
    assert len(calls) == 1

    reset_conventions()
    active_conventions()
    assert len(calls) == 2
