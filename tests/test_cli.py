import json
from pathlib import Path

import pytest

from textmask.cli import main


@pytest.fixture(autouse=True)
def _dev_profile(monkeypatch) -> None:
    monkeypatch.delenv("TEXTMASK_ENV", raising=False)
    monkeypatch.delenv("TEXTMASK_CASE_FOLD", raising=False)
    monkeypatch.setenv("TEXTMASK_LOG_LEVEL", "WARNING")


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: textmask" in captured.out


def test_cli_format_with_preset(capsys) -> None:
    exit_code = main(["format", "12345678900", "--preset", "br.cpf"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "123.456.789-00\n"


def test_cli_normalize_with_pattern(capsys) -> None:
    exit_code = main(["normalize", "(11) 99999-9999", "--pattern", "(NN) NNNNN-NNNN"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "11999999999\n"


def test_cli_format_json(capsys) -> None:
    exit_code = main(["format", "abc1d23", "--preset", "plate", "--json"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["operation"] == "format"
    assert payload["result"] == "ABC-1D23"
    assert payload["preset"] == "mercosul.license_plate"
    assert payload["pattern"] == "LLL-NANN"
    assert payload["slot_count"] == 7


def test_cli_no_case_fold(capsys) -> None:
    exit_code = main(["format", "abc1d23", "--pattern", "LLL-NANN", "--no-case-fold"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "abc-1d23\n"


def test_cli_case_fold_default_from_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TEXTMASK_CASE_FOLD", "false")

    assert main(["normalize", "abc", "--pattern", "LLL"]) == 0
    assert capsys.readouterr().out == "abc\n"

    assert main(["normalize", "abc", "--pattern", "LLL", "--case-fold"]) == 0
    assert capsys.readouterr().out == "ABC\n"


def test_cli_empty_result_prints_nothing(capsys) -> None:
    exit_code = main(["format", "abc", "--pattern", "NNN-NNNN"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == ""


def test_cli_empty_result_json_is_null(capsys) -> None:
    exit_code = main(["format", "abc", "--pattern", "NNN-NNNN", "--json"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads(captured.out)["result"] is None


def test_cli_writes_json_file(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "out" / "cpf.json"
    exit_code = main(
        ["normalize", "123.456.789-00", "--preset", "br.cpf", "-o", str(output_path)]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["result"] == "12345678900"
    assert "Wrote normalize JSON" in captured.out


def test_cli_blank_pattern_fails(capsys) -> None:
    exit_code = main(["format", "123", "--pattern", "   "])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "error: pattern must be a non-blank string" in captured.err


def test_cli_unknown_preset_fails(capsys) -> None:
    exit_code = main(["format", "123", "--preset", "xx.nothing"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "error: unknown preset 'xx.nothing'" in captured.err


def test_cli_requires_pattern_or_preset(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["format", "123"])

    assert excinfo.value.code == 2


def test_cli_presets_listing(capsys) -> None:
    exit_code = main(["presets"])
    captured = capsys.readouterr()

    assert exit_code == 0
    lines = captured.out.splitlines()
    assert "br.cpf\tNNN.NNN.NNN-NN\t123.456.789-00" in lines
    assert any(line.startswith("vin\t-\t") for line in lines)


def test_cli_presets_json(capsys) -> None:
    exit_code = main(["presets", "--json"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert {"id", "pattern", "description", "example"} <= set(payload[0])
    assert "us.ssn" in {entry["id"] for entry in payload}
