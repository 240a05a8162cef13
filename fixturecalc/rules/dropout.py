"""Rear dropout axle position: DAX and DAY.

Both are projections of the chainstay onto the fixture axes, so
DAX**2 + DAY**2 == CS length**2 for every valid input.
"""

from __future__ import annotations

from fixturecalc.core.formulas import dax, day
from fixturecalc.models import EvaluationContext, PrimaryDimensionMode
from fixturecalc.rules.base import OutputRule

DROPOUT_FIELDS = ("hta", "cslength", "bbdrop")


class DaxRule(OutputRule):
    priority = 40

    def get_id(self) -> str:
        return "dax"

    def get_name(self) -> str:
        return "DAX"

    def required_fields(self, mode: PrimaryDimensionMode) -> tuple[str, ...]:
        return DROPOUT_FIELDS

    def compute(self, context: EvaluationContext) -> float:
        return dax(context.value("hta"), context.value("cslength"), context.value("bbdrop"))


class DayRule(OutputRule):
    priority = 50

    def get_id(self) -> str:
        return "day"

    def get_name(self) -> str:
        return "DAY"

    def required_fields(self, mode: PrimaryDimensionMode) -> tuple[str, ...]:
        return DROPOUT_FIELDS

    def compute(self, context: EvaluationContext) -> float:
        return day(context.value("hta"), context.value("cslength"), context.value("bbdrop"))
