"""I/O utilities."""

from textmask.io.export import presets_to_json, to_json, write_json

__all__ = ["presets_to_json", "to_json", "write_json"]
