"""Tests for frame parameter and preset models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fixturecalc.models import (
    EXAMPLE_PRESETS,
    MODE_FIELDS,
    FIELD_LABELS,
    FrameParameters,
    PrimaryDimensionMode,
    mode_requirements,
)


def test_all_fields_default_to_unset() -> None:
    params = FrameParameters()
    assert params.hta is None
    assert params.bbdrop is None
    assert params.is_axle_to_crown is False


def test_axle_to_crown_accepts_alias_and_name() -> None:
    assert FrameParameters(isAxleToCrown=True).is_axle_to_crown is True
    assert FrameParameters(is_axle_to_crown=True).is_axle_to_crown is True
    assert FrameParameters.model_validate({"isAxleToCrown": True}).is_axle_to_crown


def test_non_numeric_value_rejected() -> None:
    with pytest.raises(ValidationError):
        FrameParameters(hta="steep")  # type: ignore[arg-type]


def test_numeric_strings_are_coerced() -> None:
    assert FrameParameters(hta="72.5").hta == 72.5  # type: ignore[arg-type]


def test_every_field_has_a_label() -> None:
    assert set(FIELD_LABELS) == set(FrameParameters.model_fields)


def test_every_mode_has_requirements() -> None:
    assert set(MODE_FIELDS) == set(PrimaryDimensionMode)
    for mode in PrimaryDimensionMode:
        assert "hta" in mode_requirements(mode)
        assert "cslength" in mode_requirements(mode)


class TestForMode:
    """Masking fields that the active mode does not read."""

    @pytest.fixture
    def everything(self) -> FrameParameters:
        return FrameParameters(
            hta=72, sta=73, htlength=150, stack=560, reach=385,
            frontcenter=600, etttaiwanese=560, etttt=555, httoffset=20,
            forklength=400, is_axle_to_crown=True, forkoffset=45, lhsh=12,
            cslength=420, bbdrop=70,
        )

    def test_stack_reach(self, everything: FrameParameters) -> None:
        masked = everything.for_mode(PrimaryDimensionMode.STACK_REACH)
        assert masked.stack == 560
        assert masked.reach == 385
        assert masked.frontcenter is None
        assert masked.forklength is None
        assert masked.is_axle_to_crown is False
        assert masked.cslength == 420

    def test_front_center(self, everything: FrameParameters) -> None:
        masked = everything.for_mode(PrimaryDimensionMode.FRONT_CENTER)
        assert masked.frontcenter == 600
        assert masked.stack is None
        assert masked.etttaiwanese is None
        assert masked.is_axle_to_crown is True

    def test_ett_tt(self, everything: FrameParameters) -> None:
        masked = everything.for_mode(PrimaryDimensionMode.ETT_TT)
        assert masked.etttt == 555
        assert masked.httoffset == 20
        assert masked.etttaiwanese is None
        assert masked.reach is None

    def test_original_is_untouched(self, everything: FrameParameters) -> None:
        everything.for_mode(PrimaryDimensionMode.ETT_TAIWANESE)
        assert everything.stack == 560


def test_presets_have_unique_names() -> None:
    names = [p.name for p in EXAMPLE_PRESETS]
    assert len(names) == len(set(names))


@pytest.mark.parametrize("preset", EXAMPLE_PRESETS, ids=lambda p: p.name)
def test_presets_supply_their_mode_fields(preset) -> None:  # type: ignore[no-untyped-def]
    required = [f for f in mode_requirements(preset.mode) if f != "is_axle_to_crown"]
    missing = [f for f in required if getattr(preset.params, f) is None]
    # STA is optional in stack & reach and front center modes
    assert set(missing) <= {"sta"}
