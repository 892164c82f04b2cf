"""
Handle (slug) generation.

Pipeline (order matters):
- transliterate known Unicode characters to ASCII tokens
- drop anything outside printable ASCII
- collapse underscore runs into the separator
- lowercase
- drop everything but the separator, letters, digits and whitespace
- collapse separator/whitespace runs into one separator
- trim the separator from both ends
"""

from __future__ import annotations

import re
from typing import Any

from .rules import HANDLE_SEPARATOR, PRINTABLE_ASCII
from .transliteration import transliterate

_SEP = re.escape(HANDLE_SEPARATOR)

_NON_PRINTABLE = re.compile(f"[^{PRINTABLE_ASCII}]")
_UNDERSCORES = re.compile(r"_+")
_NON_SLUG = re.compile(rf"[^{_SEP}\w\s]+")
_SEPARATOR_RUNS = re.compile(rf"[{_SEP}\s]+")


def handle(value: Any) -> str:
    """
    Convert text into a URL-safe handle.

    Always returns a string; input that strips to nothing yields "".
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)

    value = transliterate(value)
    value = _NON_PRINTABLE.sub("", value)
    value = _UNDERSCORES.sub(HANDLE_SEPARATOR, value)
    # only ASCII is left at this point, so \w is [a-z0-9_] and underscores are gone
    value = _NON_SLUG.sub("", value.lower())
    value = _SEPARATOR_RUNS.sub(HANDLE_SEPARATOR, value)

    return value.strip(HANDLE_SEPARATOR)


def handleize(value: Any) -> str:
    return handle(value)
