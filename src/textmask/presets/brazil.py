"""Brazilian document and phone presets."""

from __future__ import annotations

from textmask.converters import BaseConverter, DispatchConverter, PatternConverter

MOBILE_PHONE = PatternConverter(
    "(NN) NNNNN-NNNN",
    id="br.mobile_phone",
    description="Brazilian mobile phone number",
    example="(11) 99999-9999",
)
LANDLINE_PHONE = PatternConverter(
    "(NN) NNNN-NNNN",
    id="br.landline_phone",
    description="Brazilian landline phone number",
    example="(11) 3333-3333",
)
CPF = PatternConverter(
    "NNN.NNN.NNN-NN",
    id="br.cpf",
    description="CPF (individual taxpayer ID)",
    example="123.456.789-00",
)
CNPJ = PatternConverter(
    "NN.NNN.NNN/NNNN-NN",
    id="br.cnpj",
    description="CNPJ (corporate taxpayer ID)",
    example="12.345.678/0001-90",
)
CEP = PatternConverter(
    "NNNNN-NNN",
    id="br.cep",
    description="CEP (postal code)",
    example="01310-100",
)

# 11 digits is a mobile number (area code + 9 digits), anything shorter a landline.
PHONE = DispatchConverter(
    id="br.phone",
    description="Brazilian phone number, mobile or landline by digit count",
    short=LANDLINE_PHONE,
    long=MOBILE_PHONE,
    threshold=11,
    example="(11) 99999-9999",
)
# A CPF has 11 digits; past that the value can only be a CNPJ.
CPF_OR_CNPJ = DispatchConverter(
    id="br.cpf_cnpj",
    description="CPF or CNPJ by digit count",
    short=CPF,
    long=CNPJ,
    threshold=12,
    example="12.345.678/0001-90",
)

PRESETS: tuple[BaseConverter, ...] = (
    MOBILE_PHONE,
    LANDLINE_PHONE,
    PHONE,
    CPF,
    CNPJ,
    CPF_OR_CNPJ,
    CEP,
)


def format_mobile_phone(value: str | None) -> str | None:
    return MOBILE_PHONE.to_display(value)


def format_landline_phone(value: str | None) -> str | None:
    return LANDLINE_PHONE.to_display(value)


def format_phone(value: str | None) -> str | None:
    """Format as mobile with 11 or more digits, landline otherwise."""
    return PHONE.to_display(value)


def format_cpf(value: str | None) -> str | None:
    return CPF.to_display(value)


def format_cnpj(value: str | None) -> str | None:
    return CNPJ.to_display(value)


def format_cpf_or_cnpj(value: str | None) -> str | None:
    """Format as CNPJ when the value has more than 11 digits, CPF otherwise."""
    return CPF_OR_CNPJ.to_display(value)


def format_cep(value: str | None) -> str | None:
    return CEP.to_display(value)
