"""ST-HT angle: the fixture's single adjustable angle."""

from __future__ import annotations

from fixturecalc.core.formulas import st_ht_angle
from fixturecalc.models import EvaluationContext, PrimaryDimensionMode
from fixturecalc.rules.base import OutputRule


class StHtAngleRule(OutputRule):
    """STA - HTA, identical in every mode."""

    priority = 10

    def get_id(self) -> str:
        return "st_ht_angle"

    def get_name(self) -> str:
        return "ST-HT angle"

    def required_fields(self, mode: PrimaryDimensionMode) -> tuple[str, ...]:
        return ("hta", "sta")

    def compute(self, context: EvaluationContext) -> float:
        return st_ht_angle(context.value("sta"), context.value("hta"))
