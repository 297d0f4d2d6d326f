"""Character classes accepted by mask slots."""

from __future__ import annotations

import string
from typing import Literal

CharClass = Literal["numeric", "letter", "alphanumeric"]

SLOT_MARKERS: dict[str, CharClass] = {
    "N": "numeric",
    "L": "letter",
    "A": "alphanumeric",
}

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)

CLASS_ALPHABETS: dict[CharClass, frozenset[str]] = {
    "numeric": _DIGITS,
    "letter": _LETTERS,
    "alphanumeric": _DIGITS | _LETTERS,
}


def matches_class(char: str, char_class: CharClass) -> bool:
    """Return True if `char` may fill a slot of `char_class`."""
    return char in CLASS_ALPHABETS[char_class]


def count_in_class(value: str | None, char_class: CharClass) -> int:
    """Count the characters of `value` belonging to `char_class`."""
    if not value:
        return 0
    alphabet = CLASS_ALPHABETS[char_class]
    return sum(1 for char in value if char in alphabet)
