"""Pattern-based text masking: format canonical values, normalize user input."""

from textmask.core import InvalidPattern, PatternSpec, format_value, normalize, parse_pattern

__version__ = "0.1.0"

__all__ = [
    "InvalidPattern",
    "PatternSpec",
    "__version__",
    "format_value",
    "normalize",
    "parse_pattern",
]
