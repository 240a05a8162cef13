"""Named example frames used to pre-populate inputs."""

from __future__ import annotations
from pydantic import BaseModel

from .parameters import FrameParameters, PrimaryDimensionMode


class ExamplePreset(BaseModel):
    """A named set of frame parameters and the mode they are written in."""
    name: str
    description: str = ""
    mode: PrimaryDimensionMode
    params: FrameParameters


EXAMPLE_PRESETS: list[ExamplePreset] = [
    ExamplePreset(
        name="titanium-54-endurance",
        description="54cm winter endurance frame, stack & reach",
        mode=PrimaryDimensionMode.STACK_REACH,
        params=FrameParameters(
            hta=70.8, sta=73.0, stack=560, reach=385, htlength=140,
            cslength=420, bbdrop=87,
        ),
    ),
    ExamplePreset(
        name="road-56-race",
        description="56cm road race frame, stack & reach",
        mode=PrimaryDimensionMode.STACK_REACH,
        params=FrameParameters(
            hta=73.0, sta=73.5, stack=565, reach=390, htlength=150,
            cslength=405, bbdrop=70,
        ),
    ),
    ExamplePreset(
        name="gravel-54-front-center",
        description="54cm gravel frame from front center, axle-to-crown fork",
        mode=PrimaryDimensionMode.FRONT_CENTER,
        params=FrameParameters(
            hta=71.0, sta=73.5, frontcenter=610, bbdrop=72, htlength=130,
            forklength=400, is_axle_to_crown=True, forkoffset=50, lhsh=12,
            cslength=430,
        ),
    ),
    ExamplePreset(
        name="touring-58-ett",
        description="58cm touring frame, ETT measured at the head tube top",
        mode=PrimaryDimensionMode.ETT_TAIWANESE,
        params=FrameParameters(
            hta=71.5, sta=73.0, htlength=160, etttaiwanese=560,
            forklength=375, forkoffset=45, lhsh=10, bbdrop=75, cslength=445,
        ),
    ),
    ExamplePreset(
        name="steel-classic-ett-tt",
        description="Lugged steel frame, ETT measured at the HT-TT junction",
        mode=PrimaryDimensionMode.ETT_TT,
        params=FrameParameters(
            hta=72.0, sta=73.0, htlength=150, etttt=555, httoffset=20,
            forklength=395, is_axle_to_crown=True, forkoffset=45, lhsh=12,
            bbdrop=70, cslength=415,
        ),
    ),
]
