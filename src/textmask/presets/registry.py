"""Preset registry and resolution."""

from __future__ import annotations

import logging

from textmask.converters import UPPER_CASE, VIN, BaseConverter, PatternConverter
from textmask.models import PresetInfo
from textmask.presets import brazil, mercosul, united_states

logger = logging.getLogger(__name__)

_PRESETS: dict[str, BaseConverter] = {
    converter.id: converter
    for converter in (
        *brazil.PRESETS,
        *mercosul.PRESETS,
        *united_states.PRESETS,
        VIN,
        UPPER_CASE,
    )
}

_ALIASES = {
    "br.celular": "br.mobile_phone",
    "br.phone.mobile": "br.mobile_phone",
    "br.phone.landline": "br.landline_phone",
    "br.cpf_or_cnpj": "br.cpf_cnpj",
    "br.document": "br.cpf_cnpj",
    "br.license_plate": "mercosul.license_plate",
    "mercosul.plate": "mercosul.license_plate",
    "plate": "mercosul.license_plate",
    "us.mobile_phone": "us.phone",
    "us.landline_phone": "us.phone",
    "us.zip": "us.zip_code",
    "us.zip+4": "us.zip_code_plus4",
    "upper_case": "upper",
}


class UnknownPreset(KeyError):
    """Raised when a preset id matches neither a preset nor an alias."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown preset"


def resolve_preset(preset_id: str) -> BaseConverter:
    """Resolve a preset id or alias to its converter."""
    key = preset_id.strip().casefold()
    canonical = _ALIASES.get(key, key)
    try:
        converter = _PRESETS[canonical]
    except KeyError as exc:
        raise UnknownPreset(f"unknown preset {preset_id!r}") from exc
    logger.debug("resolved preset %r -> %s", preset_id, converter.id)
    return converter


def list_presets() -> list[PresetInfo]:
    """Describe every registered preset, sorted by id."""
    return [
        PresetInfo(
            id=converter.id,
            pattern=converter.pattern,
            description=converter.description,
            example=converter.example,
        )
        for converter in sorted(_PRESETS.values(), key=lambda item: item.id)
    ]


def build_converter(
    *,
    pattern: str | None = None,
    preset: str | None = None,
    case_fold: bool = True,
) -> BaseConverter:
    """Build a converter from an ad-hoc pattern or a registered preset."""
    if (pattern is None) == (preset is None):
        raise ValueError("exactly one of pattern or preset is required")
    if pattern is not None:
        return PatternConverter(pattern, case_fold=case_fold)

    converter = resolve_preset(preset)
    if isinstance(converter, PatternConverter):
        return converter.with_case_fold(case_fold)
    return converter
