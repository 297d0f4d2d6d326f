"""Display/storage converters built on the mask engine."""

from textmask.converters.base import BaseConverter
from textmask.converters.dispatch import DispatchConverter
from textmask.converters.pattern import PatternConverter
from textmask.converters.text import (
    UPPER_CASE,
    VIN,
    UpperCaseConverter,
    VinConverter,
    format_vin,
    is_valid_vin_key,
)

__all__ = [
    "UPPER_CASE",
    "VIN",
    "BaseConverter",
    "DispatchConverter",
    "PatternConverter",
    "UpperCaseConverter",
    "VinConverter",
    "format_vin",
    "is_valid_vin_key",
]
