"""Mask pattern parsing."""

from __future__ import annotations

from dataclasses import dataclass

from textmask.core.classes import SLOT_MARKERS, CharClass
from textmask.core.engine import format_value, normalize


class InvalidPattern(ValueError):
    """Raised when a mask template is missing or blank."""


@dataclass(frozen=True)
class PatternToken:
    """A single template position: either a slot or a literal character."""

    position: int
    char_class: CharClass | None = None
    literal: str | None = None


@dataclass(frozen=True)
class PatternSpec:
    """Immutable parsed form of a mask template such as ``NNN.NNN.NNN-NN``.

    ``N`` marks a digit slot, ``L`` a letter slot and ``A`` a letter-or-digit
    slot. Markers are case-sensitive; every other character is a literal.
    """

    template: str
    tokens: tuple[PatternToken, ...]
    slot_classes: tuple[CharClass, ...]
    case_fold: bool = True

    @property
    def slot_count(self) -> int:
        return len(self.slot_classes)

    @classmethod
    def parse(cls, template: str, case_fold: bool = True) -> PatternSpec:
        return parse_pattern(template, case_fold=case_fold)

    def normalize(self, value: str | None) -> str | None:
        return normalize(self, value)

    def format(self, value: str | None) -> str | None:
        return format_value(self, value)


def parse_pattern(template: str, case_fold: bool = True) -> PatternSpec:
    """Parse a mask template into a reusable `PatternSpec`."""
    if template is None or not template.strip():
        raise InvalidPattern(f"pattern must be a non-blank string, got {template!r}")

    tokens: list[PatternToken] = []
    slot_classes: list[CharClass] = []
    for position, char in enumerate(template):
        char_class = SLOT_MARKERS.get(char)
        if char_class is None:
            tokens.append(PatternToken(position=position, literal=char))
        else:
            tokens.append(PatternToken(position=position, char_class=char_class))
            slot_classes.append(char_class)

    return PatternSpec(
        template=template,
        tokens=tuple(tokens),
        slot_classes=tuple(slot_classes),
        case_fold=case_fold,
    )
