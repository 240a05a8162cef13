"""Fixture setup output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class OutputStatus(str, Enum):
    INCOMPLETE = "incomplete"
    OK = "ok"
    OUT_OF_RANGE = "out_of_range"
    CONDITIONALLY_OUT_OF_RANGE = "conditionally_out_of_range"
    ERROR = "error"


class Verdict(BaseModel, frozen=True):
    """Range classification of one computed output."""
    status: OutputStatus
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == OutputStatus.OK


class OutputResult(BaseModel):
    """One fixture output for a single evaluation."""
    id: str
    label: str
    value: float | None = None      # Rounded to 2 dp
    status: OutputStatus
    message: str | None = None
    waiting_on: list[str] = []      # Fields that blocked computation


class OutputStats(BaseModel):
    """Status counts for an evaluation."""
    total: int = 0
    ok: int = 0
    incomplete: int = 0
    out_of_range: int = 0
    errors: int = 0

    @classmethod
    def from_results(cls, results: list[OutputResult]) -> OutputStats:
        ok = sum(1 for r in results if r.status == OutputStatus.OK)
        incomplete = sum(1 for r in results if r.status == OutputStatus.INCOMPLETE)
        out_of_range = sum(
            1 for r in results
            if r.status in (OutputStatus.OUT_OF_RANGE, OutputStatus.CONDITIONALLY_OUT_OF_RANGE)
        )
        errors = sum(1 for r in results if r.status == OutputStatus.ERROR)
        return cls(
            total=len(results),
            ok=ok,
            incomplete=incomplete,
            out_of_range=out_of_range,
            errors=errors,
        )


class FixtureOutputs(BaseModel):
    """All fixture outputs for one input snapshot."""
    mode: str
    outputs: dict[str, OutputResult]
    input_errors: dict[str, str] = {}
    stats: OutputStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = OutputStats.from_results(list(self.outputs.values()))

    def __getitem__(self, output_id: str) -> OutputResult:
        return self.outputs[output_id]
