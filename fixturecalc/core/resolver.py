"""Geometry resolution: turn any primary dimension mode into stack/reach."""

from __future__ import annotations
import math

from fixturecalc.core.formulas import FixtureDomainError
from fixturecalc.models import (
    EvaluationContext, PrimaryDimensionMode, ResolvedGeometry,
)
from fixturecalc.utils.logging import get_logger

logger = get_logger(__name__)

# Inputs the resolver needs before it can produce stack/reach, per mode.
# Front center has no stack/reach intermediate.
RESOLUTION_FIELDS: dict[PrimaryDimensionMode, tuple[str, ...]] = {
    PrimaryDimensionMode.STACK_REACH: ("stack", "reach"),
    PrimaryDimensionMode.FRONT_CENTER: (),
    PrimaryDimensionMode.ETT_TAIWANESE: (
        "hta", "sta", "htlength", "etttaiwanese",
        "forklength", "forkoffset", "lhsh", "bbdrop",
    ),
    PrimaryDimensionMode.ETT_TT: (
        "hta", "sta", "htlength", "etttt", "httoffset",
        "forklength", "forkoffset", "lhsh", "bbdrop",
    ),
}


def corrected_fork_length(
    forklength: float, forkoffset: float, is_axle_to_crown: bool,
) -> float:
    """Fork length projected onto the steering axis.

    An axle-to-crown measurement is the hypotenuse of the steering-axis
    length and the offset.
    """
    if not is_axle_to_crown:
        return forklength
    if abs(forkoffset) > forklength:
        raise FixtureDomainError(
            f"Fork offset ({forkoffset}) exceeds axle-to-crown length ({forklength})"
        )
    return math.sqrt(forklength * forklength - forkoffset * forkoffset)


def stack_at_head_tube(
    hta: float,
    htlength: float,
    forklength: float,
    forkoffset: float,
    is_axle_to_crown: bool,
    lhsh: float,
    bbdrop: float,
) -> float:
    """Height above the BB of the point `htlength` up the head tube axis
    from the bottom of the head tube."""
    h = math.radians(hta)
    fork = corrected_fork_length(forklength, forkoffset, is_axle_to_crown)
    return (htlength + fork + lhsh) * math.sin(h) - forkoffset * math.cos(h) + bbdrop


def reach_from_ett(ett: float, stack: float, sta: float) -> float:
    """Reach recovered from an effective top tube measured at height `stack`."""
    return ett - stack * math.tan(math.radians(90 - sta))


class GeometryResolver:
    """Resolves the active mode's inputs into an effective stack/reach."""

    def resolve(self, context: EvaluationContext) -> None:
        """Populate context.geometry, or context.resolution_error on a
        domain error. Leaves both unset while inputs are incomplete."""
        if context.blocking_fields(RESOLUTION_FIELDS[context.mode]):
            return
        try:
            context.geometry = self._resolve(context)
        except (ValueError, ZeroDivisionError) as exc:
            context.resolution_error = str(exc)
            logger.warning("geometry_resolution_failed", error=str(exc))

    def _resolve(self, context: EvaluationContext) -> ResolvedGeometry | None:
        mode = context.mode
        p = context.params

        if mode == PrimaryDimensionMode.STACK_REACH:
            return ResolvedGeometry(stack=context.value("stack"), reach=context.value("reach"))

        if mode == PrimaryDimensionMode.FRONT_CENTER:
            return None

        if mode == PrimaryDimensionMode.ETT_TAIWANESE:
            ett = context.value("etttaiwanese")
            offset_along_ht = 0.0
        else:
            ett = context.value("etttt")
            offset_along_ht = context.value("httoffset")

        stack = stack_at_head_tube(
            hta=context.value("hta"),
            htlength=context.value("htlength") - offset_along_ht,
            forklength=context.value("forklength"),
            forkoffset=context.value("forkoffset"),
            is_axle_to_crown=p.is_axle_to_crown,
            lhsh=context.value("lhsh"),
            bbdrop=context.value("bbdrop"),
        )
        reach = reach_from_ett(ett, stack, context.value("sta"))
        logger.debug("geometry_resolved", resolved_stack=stack, resolved_reach=reach)
        return ResolvedGeometry(stack=stack, reach=reach, hty_offset=offset_along_ht)
