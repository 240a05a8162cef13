"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from fixturecalc.models import EvaluationConfig, ExamplePreset, FixtureOutputs
from fixturecalc.services.fixture_service import FixtureService, PresetNotFoundError
from fixturecalc.api.schemas import EvaluateRequest, ModeInfo, OutputInfo

router = APIRouter()

# Shared service instance
_service = FixtureService()


@router.post("/evaluate", response_model=FixtureOutputs)
async def evaluate(request: EvaluateRequest) -> FixtureOutputs:
    """Compute fixture setup outputs for one input snapshot."""
    return _service.evaluate(request.mode, request.params, request.config)


@router.get("/modes", response_model=list[ModeInfo])
async def list_modes() -> list[ModeInfo]:
    """List primary dimension modes and the fields each one reads."""
    return [ModeInfo(**m) for m in _service.list_modes()]


@router.get("/outputs", response_model=list[OutputInfo])
async def list_outputs() -> list[OutputInfo]:
    """List all fixture outputs in display order."""
    return [OutputInfo(**o) for o in _service.list_outputs()]


@router.get("/examples", response_model=list[ExamplePreset])
async def list_examples() -> list[ExamplePreset]:
    return _service.list_presets()


@router.get("/examples/{name}", response_model=ExamplePreset)
async def get_example(name: str) -> ExamplePreset:
    try:
        return _service.get_preset(name)
    except PresetNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/examples/{name}/evaluate", response_model=FixtureOutputs)
async def evaluate_example(
    name: str, config: EvaluationConfig | None = None,
) -> FixtureOutputs:
    """Evaluate an example preset as if its values had been entered."""
    try:
        return _service.evaluate_preset(name, config)
    except PresetNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
