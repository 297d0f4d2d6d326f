"""United States document and phone presets."""

from __future__ import annotations

from textmask.converters import BaseConverter, PatternConverter

# Mobile and landline numbers share the same 10-digit layout.
PHONE = PatternConverter(
    "(NNN) NNN-NNNN",
    id="us.phone",
    description="US phone number",
    example="(555) 123-4567",
)
MOBILE_PHONE = PHONE
LANDLINE_PHONE = PHONE

SSN = PatternConverter(
    "NNN-NN-NNNN",
    id="us.ssn",
    description="Social Security Number",
    example="123-45-6789",
)
ZIP_CODE = PatternConverter(
    "NNNNN",
    id="us.zip_code",
    description="ZIP code",
    example="90210",
)
ZIP_CODE_PLUS4 = PatternConverter(
    "NNNNN-NNNN",
    id="us.zip_code_plus4",
    description="ZIP+4 code",
    example="90210-1234",
)

PRESETS: tuple[BaseConverter, ...] = (PHONE, SSN, ZIP_CODE, ZIP_CODE_PLUS4)


def format_phone(value: str | None) -> str | None:
    return PHONE.to_display(value)


def format_mobile_phone(value: str | None) -> str | None:
    return MOBILE_PHONE.to_display(value)


def format_landline_phone(value: str | None) -> str | None:
    return LANDLINE_PHONE.to_display(value)


def format_ssn(value: str | None) -> str | None:
    return SSN.to_display(value)


def format_zip_code(value: str | None) -> str | None:
    return ZIP_CODE.to_display(value)


def format_zip_code_plus4(value: str | None) -> str | None:
    return ZIP_CODE_PLUS4.to_display(value)
