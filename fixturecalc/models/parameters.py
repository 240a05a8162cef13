"""Frame geometry inputs and evaluation configuration."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class PrimaryDimensionMode(str, Enum):
    """Which input parameterization locates the head tube."""
    STACK_REACH = "stack_reach"
    FRONT_CENTER = "front_center"
    ETT_TAIWANESE = "ett_taiwanese"  # ETT measured at the head tube top
    ETT_TT = "ett_tt"                # ETT measured at the HT-TT junction


# Fields every mode reads
COMMON_FIELDS: tuple[str, ...] = ("hta", "sta", "htlength", "cslength", "bbdrop")

_FORK_FIELDS: tuple[str, ...] = ("forklength", "is_axle_to_crown", "forkoffset", "lhsh")

MODE_FIELDS: dict[PrimaryDimensionMode, tuple[str, ...]] = {
    PrimaryDimensionMode.STACK_REACH: ("stack", "reach"),
    PrimaryDimensionMode.FRONT_CENTER: ("frontcenter", *_FORK_FIELDS),
    PrimaryDimensionMode.ETT_TAIWANESE: ("etttaiwanese", *_FORK_FIELDS),
    PrimaryDimensionMode.ETT_TT: ("etttt", "httoffset", *_FORK_FIELDS),
}

MODE_NAMES: dict[PrimaryDimensionMode, str] = {
    PrimaryDimensionMode.STACK_REACH: "Stack & Reach",
    PrimaryDimensionMode.FRONT_CENTER: "Front Center",
    PrimaryDimensionMode.ETT_TAIWANESE: "ETT (Taiwanese)",
    PrimaryDimensionMode.ETT_TT: "ETT at HT-TT junction",
}

FIELD_LABELS: dict[str, str] = {
    "hta": "HT angle",
    "sta": "ST angle",
    "htlength": "HT length",
    "stack": "stack",
    "reach": "reach",
    "frontcenter": "front center",
    "etttaiwanese": "ETT (Taiwanese)",
    "etttt": "ETT at HT-TT",
    "httoffset": "HT-TT offset",
    "forklength": "fork length",
    "is_axle_to_crown": "axle-to-crown",
    "forkoffset": "fork offset",
    "lhsh": "lower headset stack",
    "cslength": "CS length",
    "bbdrop": "BB drop",
}


def mode_requirements(mode: PrimaryDimensionMode) -> tuple[str, ...]:
    """All fields that are meaningful while `mode` is active."""
    return COMMON_FIELDS + MODE_FIELDS[mode]


class FrameParameters(BaseModel):
    """
    Parsed frame geometry. Lengths in mm, angles in degrees.

    Every field is optional; an unset field is None. Range checks are
    done per field by the InputValidator, not here, so that one bad
    value only blocks the outputs that depend on it.
    """
    model_config = ConfigDict(populate_by_name=True)

    hta: float | None = None            # Head tube angle
    sta: float | None = None            # Seat tube angle above the bend
    htlength: float | None = None       # Head tube length
    stack: float | None = None
    reach: float | None = None
    frontcenter: float | None = None    # BB center to front axle
    etttaiwanese: float | None = None   # ETT at head tube top
    etttt: float | None = None          # ETT at HT-TT junction
    httoffset: float | None = None      # HT top down to the TT junction
    forklength: float | None = None
    is_axle_to_crown: bool = Field(default=False, alias="isAxleToCrown")
    forkoffset: float | None = None     # Signed
    lhsh: float | None = None           # Lower headset stack height
    cslength: float | None = None       # Chainstay length
    bbdrop: float | None = None         # Signed

    def for_mode(self, mode: PrimaryDimensionMode) -> FrameParameters:
        """Copy with every field outside the mode's requirement set cleared."""
        keep = set(mode_requirements(mode))
        cleared: dict[str, object] = {
            name: None
            for name in type(self).model_fields
            if name not in keep and name != "is_axle_to_crown"
        }
        if "is_axle_to_crown" not in keep:
            cleared["is_axle_to_crown"] = False
        return self.model_copy(update=cleared)


class EvaluationConfig(BaseModel):
    """Controls which outputs are evaluated."""
    enabled_outputs: list[str] = []    # Empty = all registered outputs
    disabled_outputs: list[str] = []   # Explicitly skip specific outputs
