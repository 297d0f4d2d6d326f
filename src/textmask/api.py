"""HTTP API for textmask."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from textmask import __version__
from textmask.config import load_config
from textmask.log import configure_logging
from textmask.models import HealthResponse, MaskRequest, MaskResponse, Operation, PresetInfo
from textmask.presets import list_presets
from textmask.service import run_mask


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="textmask",
        version=__version__,
        description="Pattern-based text masking service API.",
    )
    config = load_config()
    configure_logging(config.log_level)

    def _run(request: MaskRequest, operation: Operation) -> MaskResponse:
        try:
            return run_mask(request, operation)
        except (KeyError, ValueError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.get("/v1/presets", response_model=list[PresetInfo], tags=["presets"])
    def presets() -> list[PresetInfo]:
        return list_presets()

    @app.post("/v1/format", response_model=MaskResponse, tags=["masking"])
    def format_value(request: MaskRequest) -> MaskResponse:
        return _run(request, "format")

    @app.post("/v1/normalize", response_model=MaskResponse, tags=["masking"])
    def normalize(request: MaskRequest) -> MaskResponse:
        return _run(request, "normalize")

    return app


app = create_app()
