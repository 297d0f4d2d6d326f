"""Format/normalize transforms over a parsed mask pattern.

Both functions are single pass: normalization walks the input with one cursor
and the slot list with another, never backtracking, so cost is linear in the
input and bounded by the pattern's slot count.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textmask.core.classes import matches_class

if TYPE_CHECKING:
    from textmask.core.pattern import PatternSpec


def normalize(spec: PatternSpec, value: str | None) -> str | None:
    """Reduce display or raw input to the canonical, separator-free value.

    Characters that do not fit the class of the next open slot are skipped
    without consuming the slot. Returns None when nothing was accepted.
    """
    if not value:
        return None

    slot_classes = spec.slot_classes
    slot_count = len(slot_classes)
    accepted: list[str] = []
    for char in value:
        if len(accepted) >= slot_count:
            break
        if matches_class(char, slot_classes[len(accepted)]):
            accepted.append(char.upper() if spec.case_fold else char)

    return "".join(accepted) or None


def format_value(spec: PatternSpec, value: str | None) -> str | None:
    """Lay the canonical form of `value` out against the pattern template.

    Emission stops with the last available slot character, so a partial value
    never gets the literals that follow it.
    """
    canonical = normalize(spec, value)
    if canonical is None:
        return None

    pieces: list[str] = []
    cursor = 0
    for token in spec.tokens:
        if cursor >= len(canonical):
            break
        if token.char_class is None:
            pieces.append(token.literal)
        else:
            pieces.append(canonical[cursor])
            cursor += 1
    return "".join(pieces)
