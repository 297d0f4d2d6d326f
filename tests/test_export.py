import json
from pathlib import Path

from textmask.io import presets_to_json, to_json, write_json
from textmask.models import MaskRequest
from textmask.presets import list_presets
from textmask.service import run_mask


def test_to_json_and_write_json(tmp_path: Path) -> None:
    response = run_mask(MaskRequest(value="123456789", preset="us.ssn"), "format")

    payload = json.loads(to_json(response))
    assert payload["result"] == "123-45-6789"
    assert payload["preset"] == "us.ssn"

    output_path = tmp_path / "out" / "ssn.json"
    write_json(response, output_path)
    written = json.loads(output_path.read_text(encoding="utf-8"))
    assert written["pattern"] == "NNN-NN-NNNN"


def test_presets_to_json() -> None:
    payload = json.loads(presets_to_json(list_presets()))

    assert isinstance(payload, list)
    assert payload[0]["id"] == "br.cep"
