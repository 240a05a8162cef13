"""Closed-form fixture setup formulas.

Angles are in degrees at the interface and converted to radians
internally. Lengths are in whatever unit the inputs use (mm in practice).

The fixture holds the head tube perpendicular to its main rail, so every
head tube position is expressed in a frame rotated by the head tube angle:
X runs along the rail, Y along the head tube axis.
"""

from __future__ import annotations
import math
from decimal import Decimal, ROUND_FLOOR


class FixtureDomainError(ValueError):
    """A formula input lies outside the domain of its trig function."""


def round2(value: float) -> float:
    """Round to two decimals, halves toward +infinity.

    Works on the shortest decimal representation of the float, so 1.005
    rounds to 1.01 and -1.005 to -1.0.
    """
    scaled = Decimal(repr(value)).scaleb(2) + Decimal("0.5")
    return float(scaled.to_integral_value(rounding=ROUND_FLOOR).scaleb(-2))


def st_ht_angle(sta: float, hta: float) -> float:
    """Angle the fixture's adjustable joint is set to."""
    return sta - hta


def _polar_angle(hta: float, stack: float, reach: float) -> float:
    # atan, not atan2: a reach <= 0 flips the sign of HTX and HTY
    return math.pi - math.radians(hta) - math.atan(stack / reach)


def htx(hta: float, stack: float, reach: float) -> float:
    """Distance along the main rail to the head tube axis."""
    return math.hypot(stack, reach) * math.sin(_polar_angle(hta, stack, reach))


def hty(hta: float, htlength: float, stack: float, reach: float) -> float:
    """Height of the head tube bottom along the head tube axis."""
    return math.hypot(stack, reach) * math.cos(_polar_angle(hta, stack, reach)) - htlength


def _horizontal_front_center(frontcenter: float, bbdrop: float) -> float:
    radicand = frontcenter * frontcenter - bbdrop * bbdrop
    if radicand < 0:
        raise FixtureDomainError(
            f"BB drop ({bbdrop}) exceeds front center ({frontcenter}) in magnitude"
        )
    return math.sqrt(radicand)


def front_center_htx(hta: float, frontcenter: float, bbdrop: float, forkoffset: float) -> float:
    """HTX from the front axle position instead of stack/reach."""
    h = math.radians(hta)
    fcx = _horizontal_front_center(frontcenter, bbdrop)
    return math.sin(h) * fcx + bbdrop * math.cos(h) - forkoffset


def front_center_hty(
    hta: float,
    frontcenter: float,
    bbdrop: float,
    fork_length: float,
    lhsh: float,
) -> float:
    """HTY from the front axle position.

    `fork_length` must already be measured along the steering axis.
    """
    h = math.radians(hta)
    fcx = _horizontal_front_center(frontcenter, bbdrop)
    return fork_length + lhsh - (fcx * math.cos(h) - bbdrop * math.sin(h))


def _chainstay_angle(hta: float, cslength: float, bbdrop: float) -> float:
    ratio = bbdrop / cslength
    if abs(ratio) > 1:
        raise FixtureDomainError(
            f"BB drop ({bbdrop}) exceeds CS length ({cslength}) in magnitude"
        )
    return math.radians(90 - hta) + math.asin(ratio)


def dax(hta: float, cslength: float, bbdrop: float) -> float:
    """Rear dropout axle position along the main rail."""
    return cslength * math.cos(_chainstay_angle(hta, cslength, bbdrop))


def day(hta: float, cslength: float, bbdrop: float) -> float:
    """Rear dropout axle height."""
    return cslength * math.sin(_chainstay_angle(hta, cslength, bbdrop))
