"""Response serializers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter

from textmask.models import MaskResponse, PresetInfo

_PRESET_LIST = TypeAdapter(list[PresetInfo])


def to_json(response: MaskResponse) -> str:
    """Serialize a mask response to formatted JSON."""
    return response.model_dump_json(indent=2)


def presets_to_json(presets: Sequence[PresetInfo]) -> str:
    """Serialize a preset catalog to formatted JSON."""
    return _PRESET_LIST.dump_json(list(presets), indent=2).decode("utf-8")


def write_json(response: MaskResponse, output_path: str | Path) -> None:
    """Write mask response JSON to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(response) + "\n", encoding="utf-8")
