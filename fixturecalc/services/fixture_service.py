"""High-level fixture calculation service: facade for the API layer."""

from __future__ import annotations

from fixturecalc.models import (
    EvaluationConfig, ExamplePreset, FixtureOutputs, FrameParameters,
    PrimaryDimensionMode, EXAMPLE_PRESETS, MODE_NAMES, mode_requirements,
)
from fixturecalc.core.evaluator import FixtureEvaluator
from fixturecalc.core.registry import OutputRegistry, create_default_registry
from fixturecalc.utils.logging import clear_evaluation_context, set_evaluation_context


class PresetNotFoundError(KeyError):
    """Raised when an example preset name is unknown."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown example preset: {name!r}")


class FixtureService:
    """Delegates to the evaluator and serves example presets."""

    def __init__(
        self,
        registry: OutputRegistry | None = None,
        presets: list[ExamplePreset] | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.evaluator = FixtureEvaluator(self.registry)
        self._presets = {p.name: p for p in (presets if presets is not None else EXAMPLE_PRESETS)}

    def evaluate(
        self,
        mode: PrimaryDimensionMode,
        params: FrameParameters | None = None,
        config: EvaluationConfig | None = None,
        *,
        preset: str | None = None,
    ) -> FixtureOutputs:
        if params is None:
            params = FrameParameters()
        clear_evaluation_context()
        set_evaluation_context(mode=mode.value, preset=preset)
        return self.evaluator.evaluate(mode, params, config)

    def list_outputs(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]

    def list_modes(self) -> list[dict[str, object]]:
        return [
            {"id": mode.value, "name": MODE_NAMES[mode], "fields": list(mode_requirements(mode))}
            for mode in PrimaryDimensionMode
        ]

    def list_presets(self) -> list[ExamplePreset]:
        return list(self._presets.values())

    def get_preset(self, name: str) -> ExamplePreset:
        try:
            return self._presets[name]
        except KeyError:
            raise PresetNotFoundError(name) from None

    def evaluate_preset(
        self, name: str, config: EvaluationConfig | None = None,
    ) -> FixtureOutputs:
        """Evaluate a preset exactly as if its values had been entered."""
        preset = self.get_preset(name)
        return self.evaluate(preset.mode, preset.params, config, preset=preset.name)
