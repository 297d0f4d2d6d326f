"""Template-driven converter."""

from __future__ import annotations

from textmask.converters.base import BaseConverter
from textmask.core import PatternSpec, format_value, normalize, parse_pattern


class PatternConverter(BaseConverter):
    """Converter backed by a mask template.

    Display output is the formatted value, storage output the canonical one.
    """

    def __init__(
        self,
        pattern: str,
        *,
        case_fold: bool = True,
        id: str = "pattern",
        description: str = "Custom mask pattern",
        example: str | None = None,
    ) -> None:
        self.spec: PatternSpec = parse_pattern(pattern, case_fold=case_fold)
        self.id = id
        self.description = description
        self.example = example

    @property
    def pattern(self) -> str:
        return self.spec.template

    @property
    def max_length(self) -> int:
        return self.spec.slot_count

    def to_display(self, value: str | None) -> str | None:
        return format_value(self.spec, value)

    def to_storage(self, value: str | None) -> str | None:
        return normalize(self.spec, value)

    def with_case_fold(self, case_fold: bool) -> PatternConverter:
        """Return this converter, or a copy of it with a different case policy."""
        if case_fold == self.spec.case_fold:
            return self
        return PatternConverter(
            self.pattern,
            case_fold=case_fold,
            id=self.id,
            description=self.description,
            example=self.example,
        )

    def __repr__(self) -> str:
        return f"PatternConverter({self.pattern!r}, case_fold={self.spec.case_fold}, id={self.id!r})"
