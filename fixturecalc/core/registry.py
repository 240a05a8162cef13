"""Output registry: stores and selects fixture output rules."""

from __future__ import annotations

from fixturecalc.models import EvaluationConfig
from fixturecalc.rules.base import OutputRule


class OutputRegistry:
    """
    Central registry for all fixture output rules.

    Rules are registered at startup. During evaluation, the registry
    returns the selected rules sorted by priority.
    """

    def __init__(self) -> None:
        self._rules: dict[str, OutputRule] = {}

    def register(self, rule: OutputRule) -> None:
        """Register an output rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> OutputRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[OutputRule]:
        """Return all registered rules in priority order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def get_applicable_rules(self, config: EvaluationConfig) -> list[OutputRule]:
        """
        Return the rules to evaluate, sorted by priority.

        Respects EvaluationConfig.enabled_outputs and disabled_outputs.
        """
        candidates = self.list_rules()

        if config.enabled_outputs:
            candidates = [r for r in candidates if r.get_id() in config.enabled_outputs]

        if config.disabled_outputs:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_outputs]

        return candidates


def create_default_registry() -> OutputRegistry:
    """Create a registry with all five fixture outputs."""
    from fixturecalc.rules.angle import StHtAngleRule
    from fixturecalc.rules.dropout import DaxRule, DayRule
    from fixturecalc.rules.head_tube import HtxRule, HtyRule

    registry = OutputRegistry()
    registry.register(StHtAngleRule())
    registry.register(HtxRule())
    registry.register(HtyRule())
    registry.register(DaxRule())
    registry.register(DayRule())
    return registry
