import re

import pytest

from liquid_filters.slug import handle
from liquid_filters.transliteration import CHARS, iter_variants, transliterate


def test_no_variant_maps_to_two_canonicals():
    owners = {}
    for canonical, variant in iter_variants():
        assert owners.setdefault(variant, canonical) == canonical, variant


def test_canonical_tokens_are_ascii():
    for canonical in CHARS:
        assert canonical == " " or re.fullmatch(r"[A-Za-z0-9()]+", canonical)


def test_variants_are_non_empty_and_not_plain_ascii_letters():
    for canonical, variant in iter_variants():
        assert variant
        assert not re.fullmatch(r"[A-Za-z0-9 ]+", variant), (canonical, variant)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CHARS["x"] = ("y",)


def test_table_keeps_insertion_order():
    keys = list(CHARS)
    assert keys[:3] == ["0", "1", "2"]
    assert keys.index("a") < keys.index("aa") < keys.index("A") < keys.index("AE")
    assert keys[-1] == " "


def _shadowed(variant, earlier):
    return any(other != variant and other in variant for other in earlier)


def test_every_variant_reduces_like_its_canonical():
    earlier = []
    checked = 0
    for canonical, variant in iter_variants():
        if not _shadowed(variant, earlier):
            assert handle(variant) == handle(canonical), (canonical, variant)
            checked += 1
        earlier.append(variant)
    assert checked > 700


def test_earlier_entry_wins_on_overlap():
    # "ိ" (i) is replaced before "ို" (o) gets a chance; "ု" then becomes "u"
    assert transliterate("ို") == "iu"


def test_multi_character_canonicals():
    assert transliterate("щука") == "shchuka"
    assert transliterate("Straße") == "Strasse"
    assert transliterate("©") == "(c)"


def test_unicode_spaces_become_plain_spaces():
    assert transliterate("a b c　d") == "a b c d"


def test_greek_oxia_letters_share_tonos_tokens():
    assert handle("\u1f71") == handle("\u03ac") == "a"
    assert handle("\u1f73\u1f77") == "ei"
    assert handle("\u1fbb\u1fc9\u1fdb\u1ff9") == "aeio"
    assert transliterate("\u1fd3") == "i"
