"""Evaluation context: holds the state of a single evaluation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .parameters import EvaluationConfig, FrameParameters, PrimaryDimensionMode


class ResolvedGeometry(BaseModel):
    """Effective stack/reach pair used by the generic HTX/HTY formulas."""
    stack: float
    reach: float
    hty_offset: float = 0.0  # Added to HTY to refer it to the head tube top


class EvaluationContext(BaseModel):
    """
    Holds all state during a single evaluation pass.

    The resolver fills in `geometry` (or `resolution_error`).
    Output rules read from the context and never write to it.
    """
    # Input
    mode: PrimaryDimensionMode
    params: FrameParameters
    config: EvaluationConfig = Field(default_factory=EvaluationConfig)
    invalid_fields: set[str] = set()

    # Resolution results (populated by the resolver)
    geometry: ResolvedGeometry | None = None
    resolution_error: str | None = None

    def blocking_fields(self, fields: tuple[str, ...] | list[str]) -> list[str]:
        """Fields from `fields` that are unset or failed input validation."""
        return [
            f for f in fields
            if getattr(self.params, f) is None or f in self.invalid_fields
        ]

    def value(self, field: str) -> float:
        """Value of a field known to be present."""
        v = getattr(self.params, field)
        if v is None:
            raise KeyError(field)
        return v
