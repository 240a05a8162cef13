"""Per-field precondition checks on frame parameters.

These are the checks a form layer runs before handing values to the
calculator. They return a result instead of raising so that a single bad
field only blocks the outputs that read it.
"""

from __future__ import annotations
import math

from pydantic import BaseModel

from fixturecalc.models import FrameParameters, PrimaryDimensionMode
from fixturecalc.models.limits import MIN_HT_LENGTH_LARGEST

ANGLE_MESSAGE = "Must be a reasonable number in degrees"
NUMBER_MESSAGE = "Must be a number"
POSITIVE_MESSAGE = "Must be a positive number"
NON_NEGATIVE_MESSAGE = "Must be zero or a positive number"
HT_LENGTH_MESSAGE = (
    f"Must be a positive number greater than or equal to {MIN_HT_LENGTH_LARGEST:g}"
)
BB_DROP_CS_MESSAGE = (
    "Must be a number that is less than or equal to CS length in magnitude"
)
BB_DROP_FC_MESSAGE = (
    "Must be a number that is less than or equal to front center in magnitude"
)
FORK_OFFSET_MESSAGE = (
    "Must be a number that is less than or equal to fork length in magnitude "
    "when fork length is axle-to-crown"
)

_ANGLE_FIELDS = ("hta", "sta")
_POSITIVE_FIELDS = (
    "stack", "reach", "frontcenter", "etttaiwanese", "etttt",
    "httoffset", "forklength", "cslength",
)
_SIGNED_FIELDS = ("bbdrop", "forkoffset")


class InputValidationResult(BaseModel):
    """Outcome of validating one input snapshot."""
    errors: dict[str, str] = {}

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def invalid_fields(self) -> set[str]:
        return set(self.errors)


class InputValidator:
    """Stateless validator for FrameParameters.

    Unset fields are never errors; whether they are needed is decided by
    the output that reads them.
    """

    def validate(
        self,
        params: FrameParameters,
        mode: PrimaryDimensionMode | None = None,
    ) -> InputValidationResult:
        errors: dict[str, str] = {}

        for name in _ANGLE_FIELDS:
            value = getattr(params, name)
            if value is not None and not 0 < value < 180:
                errors[name] = ANGLE_MESSAGE

        for name in _POSITIVE_FIELDS:
            value = getattr(params, name)
            if value is not None and not value > 0:
                errors[name] = POSITIVE_MESSAGE

        if params.htlength is not None and not params.htlength >= MIN_HT_LENGTH_LARGEST:
            errors["htlength"] = HT_LENGTH_MESSAGE

        if params.lhsh is not None and not params.lhsh >= 0:
            errors["lhsh"] = NON_NEGATIVE_MESSAGE

        for name in _SIGNED_FIELDS:
            value = getattr(params, name)
            if value is not None and not math.isfinite(value):
                errors[name] = NUMBER_MESSAGE

        # Cross-field magnitude limits; skipped while the other side is unset
        if params.bbdrop is not None and "bbdrop" not in errors:
            if params.cslength is not None and not abs(params.bbdrop) <= params.cslength:
                errors["bbdrop"] = BB_DROP_CS_MESSAGE
            elif (
                mode == PrimaryDimensionMode.FRONT_CENTER
                and params.frontcenter is not None
                and not abs(params.bbdrop) <= params.frontcenter
            ):
                errors["bbdrop"] = BB_DROP_FC_MESSAGE

        if (
            params.is_axle_to_crown
            and params.forkoffset is not None
            and params.forklength is not None
            and "forkoffset" not in errors
            and not abs(params.forkoffset) <= params.forklength
        ):
            errors["forkoffset"] = FORK_OFFSET_MESSAGE

        return InputValidationResult(errors=errors)
