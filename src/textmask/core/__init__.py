"""Mask engine: pattern parsing plus the format/normalize pair."""

from textmask.core.classes import CharClass, count_in_class, matches_class
from textmask.core.engine import format_value, normalize
from textmask.core.pattern import InvalidPattern, PatternSpec, PatternToken, parse_pattern

__all__ = [
    "CharClass",
    "InvalidPattern",
    "PatternSpec",
    "PatternToken",
    "count_in_class",
    "format_value",
    "matches_class",
    "normalize",
    "parse_pattern",
]
