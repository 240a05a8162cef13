"""Classify computed outputs against the fixture's physical limits."""

from __future__ import annotations

from fixturecalc.models import OutputStatus, Verdict, RANGE_LIMITS
from fixturecalc.models.limits import MAX_HTY_TOP_LARGEST, MAX_HTY_TOP_SMALLEST

OUT_OF_RANGE_MESSAGE = "Out of range"
HTY_TOP_DEFINITE_MESSAGE = (
    "HTY (bottom) is within range, but the top of the head tube "
    "will exceed the upper limit"
)
HTY_TOP_POSSIBLE_MESSAGE = (
    "HTY (bottom) is within range, but the top of the head tube "
    "could possibly exceed the upper limit, depending on its diameter"
)

_OK = Verdict(status=OutputStatus.OK)
_OUT_OF_RANGE = Verdict(status=OutputStatus.OUT_OF_RANGE, message=OUT_OF_RANGE_MESSAGE)


class RangeValidator:
    """
    Stateless range checks. Values passed in should already be rounded
    for presentation; the checks are inclusive at both ends.
    """

    def check(self, output_id: str, value: float) -> Verdict:
        """Simple inclusive membership test against RANGE_LIMITS."""
        if RANGE_LIMITS[output_id].contains(value):
            return _OK
        return _OUT_OF_RANGE

    def check_hty(self, value: float, htlength: float | None) -> Verdict:
        """
        Two-stage HTY check.

        The bottom of the head tube must be inside the HTY limits. The top
        (value + htlength) must also clear the fixture, but how much room
        there is depends on the head tube diameter, so between the limits
        for the narrowest and widest tube the verdict is only advisory.
        """
        primary = self.check("hty", value)
        if not primary.ok or htlength is None:
            return primary

        top = value + htlength
        if top > MAX_HTY_TOP_SMALLEST:
            if top > MAX_HTY_TOP_LARGEST:
                message = HTY_TOP_DEFINITE_MESSAGE
            else:
                message = HTY_TOP_POSSIBLE_MESSAGE
            return Verdict(status=OutputStatus.CONDITIONALLY_OUT_OF_RANGE, message=message)
        return _OK
