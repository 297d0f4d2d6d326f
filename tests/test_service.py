import pytest

from textmask.models import MaskRequest
from textmask.presets import UnknownPreset
from textmask.service import run_mask


def test_run_mask_format_with_pattern() -> None:
    response = run_mask(MaskRequest(value="90210-1234", pattern="NNNNN-NNNN"), "format")

    assert response.operation == "format"
    assert response.input == "90210-1234"
    assert response.result == "90210-1234"
    assert response.pattern == "NNNNN-NNNN"
    assert response.preset is None
    assert response.slot_count == 9


def test_run_mask_normalize_with_alias_reports_canonical_preset() -> None:
    response = run_mask(MaskRequest(value="90210-1234", preset="us.zip+4"), "normalize")

    assert response.result == "902101234"
    assert response.preset == "us.zip_code_plus4"


def test_run_mask_text_converter_has_no_pattern() -> None:
    response = run_mask(MaskRequest(value="1hgcm82633a0o4352", preset="vin"), "format")

    assert response.result == "1HGCM82633A04352"
    assert response.pattern is None
    assert response.slot_count == 17


def test_run_mask_unknown_preset() -> None:
    with pytest.raises(UnknownPreset):
        run_mask(MaskRequest(value="1", preset="nope"), "format")
