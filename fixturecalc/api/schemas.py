"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from fixturecalc.models import (
    EvaluationConfig, FrameParameters, PrimaryDimensionMode,
)


class EvaluateRequest(BaseModel):
    """Request body for the /evaluate endpoint."""
    mode: PrimaryDimensionMode = PrimaryDimensionMode.STACK_REACH
    params: FrameParameters = FrameParameters()
    config: EvaluationConfig = EvaluationConfig()


class OutputInfo(BaseModel):
    id: str
    name: str


class ModeInfo(BaseModel):
    id: str
    name: str
    fields: list[str]
