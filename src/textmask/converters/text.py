"""Converters that clean free text rather than lay it out against a template."""

from __future__ import annotations

from textmask.converters.base import BaseConverter

# Letters excluded from Vehicle Identification Numbers (confusable with 1, 0, 9).
_VIN_EXCLUDED = "IOQ"
_VIN_STRIP = str.maketrans("", "", _VIN_EXCLUDED)
_VIN_BLOCKED_KEYS = frozenset(_VIN_EXCLUDED + _VIN_EXCLUDED.lower())


def format_vin(value: str | None) -> str | None:
    """Upper-case a VIN and drop the letters I, O and Q."""
    if not value:
        return value
    return value.upper().translate(_VIN_STRIP)


def is_valid_vin_key(key: str) -> bool:
    """Return False for key presses that can never be part of a VIN."""
    return key not in _VIN_BLOCKED_KEYS


class UpperCaseConverter(BaseConverter):
    """Upper-cases values in both directions."""

    id = "upper"
    description = "Upper-cased free text"
    example = "ABC DEF"

    def to_display(self, value: str | None) -> str | None:
        return None if value is None else value.upper()

    def to_storage(self, value: str | None) -> str | None:
        return None if value is None else value.upper()


class VinConverter(BaseConverter):
    """Vehicle Identification Number cleanup, identical in both directions."""

    id = "vin"
    description = "Vehicle Identification Number (no I, O or Q)"
    example = "1HGCM82633A004352"
    max_length = 17

    def to_display(self, value: str | None) -> str | None:
        return format_vin(value)

    def to_storage(self, value: str | None) -> str | None:
        return format_vin(value)


UPPER_CASE = UpperCaseConverter()
VIN = VinConverter()
