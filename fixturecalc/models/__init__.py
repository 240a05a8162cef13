from .parameters import (
    FrameParameters, PrimaryDimensionMode, EvaluationConfig,
    COMMON_FIELDS, MODE_FIELDS, MODE_NAMES, FIELD_LABELS, mode_requirements,
)
from .outputs import OutputStatus, Verdict, OutputResult, FixtureOutputs, OutputStats
from .context import EvaluationContext, ResolvedGeometry
from .limits import Bounds, RANGE_LIMITS
from .presets import ExamplePreset, EXAMPLE_PRESETS

__all__ = [
    "FrameParameters", "PrimaryDimensionMode", "EvaluationConfig",
    "COMMON_FIELDS", "MODE_FIELDS", "MODE_NAMES", "FIELD_LABELS", "mode_requirements",
    "OutputStatus", "Verdict", "OutputResult", "FixtureOutputs", "OutputStats",
    "EvaluationContext", "ResolvedGeometry",
    "Bounds", "RANGE_LIMITS",
    "ExamplePreset", "EXAMPLE_PRESETS",
]
