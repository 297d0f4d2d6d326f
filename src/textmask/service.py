"""Request-level entry point shared by the CLI and the HTTP API."""

from __future__ import annotations

import logging

from textmask.models import MaskRequest, MaskResponse, Operation
from textmask.presets import build_converter

logger = logging.getLogger(__name__)


def run_mask(request: MaskRequest, operation: Operation) -> MaskResponse:
    """Format or normalize `request.value` with the requested converter.

    Raises ValueError for a blank pattern or a missing/duplicated selector, and
    `UnknownPreset` (a KeyError) for an unregistered preset id.
    """
    converter = build_converter(
        pattern=request.pattern,
        preset=request.preset,
        case_fold=request.case_fold,
    )
    if operation == "format":
        result = converter.to_display(request.value)
    else:
        result = converter.to_storage(request.value)
    logger.debug("%s via %s: %r -> %r", operation, converter.id, request.value, result)

    return MaskResponse(
        operation=operation,
        input=request.value,
        result=result,
        pattern=converter.pattern,
        preset=None if request.preset is None else converter.id,
        slot_count=converter.max_length,
    )
