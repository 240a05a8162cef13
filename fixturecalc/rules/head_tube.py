"""Head tube position on the fixture: HTX and HTY.

Front center mode uses its own closed forms from the front axle position.
Every other mode goes through the stack/reach pair left on the context
by the GeometryResolver.
"""

from __future__ import annotations

from fixturecalc.core import formulas
from fixturecalc.core.range_validator import RangeValidator
from fixturecalc.core.resolver import RESOLUTION_FIELDS, corrected_fork_length
from fixturecalc.models import (
    EvaluationContext, PrimaryDimensionMode, ResolvedGeometry, Verdict,
)
from fixturecalc.rules.base import OutputRule


def _unique(*fields: str) -> tuple[str, ...]:
    return tuple(dict.fromkeys(fields))


def _geometry(context: EvaluationContext) -> ResolvedGeometry:
    if context.geometry is None:
        raise formulas.FixtureDomainError(
            context.resolution_error or "Stack and reach could not be resolved"
        )
    return context.geometry


class HtxRule(OutputRule):
    """Head tube axis position along the main rail."""

    priority = 20

    def get_id(self) -> str:
        return "htx"

    def get_name(self) -> str:
        return "HTX"

    def required_fields(self, mode: PrimaryDimensionMode) -> tuple[str, ...]:
        if mode == PrimaryDimensionMode.FRONT_CENTER:
            return ("hta", "frontcenter", "bbdrop", "forkoffset")
        return _unique("hta", *RESOLUTION_FIELDS[mode])

    def compute(self, context: EvaluationContext) -> float:
        hta = context.value("hta")
        if context.mode == PrimaryDimensionMode.FRONT_CENTER:
            return formulas.front_center_htx(
                hta,
                context.value("frontcenter"),
                context.value("bbdrop"),
                context.value("forkoffset"),
            )
        g = _geometry(context)
        return formulas.htx(hta, g.stack, g.reach)


class HtyRule(OutputRule):
    """Head tube bottom position along the head tube axis."""

    priority = 30

    def get_id(self) -> str:
        return "hty"

    def get_name(self) -> str:
        return "HTY"

    def required_fields(self, mode: PrimaryDimensionMode) -> tuple[str, ...]:
        if mode == PrimaryDimensionMode.FRONT_CENTER:
            return (
                "hta", "frontcenter", "bbdrop", "forklength", "forkoffset", "lhsh",
            )
        return _unique("hta", *RESOLUTION_FIELDS[mode], "htlength")

    def compute(self, context: EvaluationContext) -> float:
        hta = context.value("hta")
        if context.mode == PrimaryDimensionMode.FRONT_CENTER:
            fork = corrected_fork_length(
                context.value("forklength"),
                context.value("forkoffset"),
                context.params.is_axle_to_crown,
            )
            return formulas.front_center_hty(
                hta,
                context.value("frontcenter"),
                context.value("bbdrop"),
                fork,
                context.value("lhsh"),
            )
        g = _geometry(context)
        return formulas.hty(hta, context.value("htlength"), g.stack, g.reach) + g.hty_offset

    def classify(
        self, value: float, context: EvaluationContext, validator: RangeValidator,
    ) -> Verdict:
        # The head tube top check only runs when HT length is known
        htlength = context.params.htlength
        if "htlength" in context.invalid_fields:
            htlength = None
        return validator.check_hty(value, htlength)
