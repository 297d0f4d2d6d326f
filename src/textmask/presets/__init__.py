"""Country and document presets."""

from textmask.presets.registry import (
    UnknownPreset,
    build_converter,
    list_presets,
    resolve_preset,
)

__all__ = ["UnknownPreset", "build_converter", "list_presets", "resolve_preset"]
