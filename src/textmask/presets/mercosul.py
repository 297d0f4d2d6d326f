"""Mercosul presets (Argentina, Brazil, Paraguay, Uruguay)."""

from __future__ import annotations

from textmask.converters import BaseConverter, PatternConverter

# Three letters, a digit, a letter and two digits; adopted from 2018.
LICENSE_PLATE = PatternConverter(
    "LLL-NANN",
    id="mercosul.license_plate",
    description="Mercosul vehicle license plate",
    example="ABC-1D23",
)

PRESETS: tuple[BaseConverter, ...] = (LICENSE_PLATE,)


def format_license_plate(value: str | None) -> str | None:
    return LICENSE_PLATE.to_display(value)
