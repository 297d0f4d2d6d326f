"""Shared data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Operation = Literal["format", "normalize"]


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class MaskRequest(BaseModel):
    """Mask request payload used by both CLI and API.

    Exactly one of `pattern` or `preset` selects the converter.
    """

    value: str | None = None
    pattern: str | None = None
    preset: str | None = Field(default=None, min_length=1)
    case_fold: bool = True


class MaskResponse(BaseModel):
    """Result of a format or normalize call."""

    operation: Operation
    input: str | None
    result: str | None
    pattern: str | None = None
    preset: str | None = None
    slot_count: int | None = Field(default=None, ge=0)


class PresetInfo(BaseModel):
    """Catalog entry for a registered preset."""

    id: str = Field(min_length=1)
    pattern: str | None = None
    description: str
    example: str | None = None
