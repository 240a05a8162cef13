"""Unit tests for OutputRegistry."""

from __future__ import annotations

import pytest

from fixturecalc.core.registry import OutputRegistry, create_default_registry
from fixturecalc.models import EvaluationConfig
from fixturecalc.rules.head_tube import HtxRule


@pytest.fixture
def registry() -> OutputRegistry:
    return create_default_registry()


def _ids(rules: list) -> list[str]:
    return [r.get_id() for r in rules]


def test_default_rules_in_display_order(registry: OutputRegistry) -> None:
    assert _ids(registry.list_rules()) == ["st_ht_angle", "htx", "hty", "dax", "day"]


def test_get_rule(registry: OutputRegistry) -> None:
    assert isinstance(registry.get_rule("htx"), HtxRule)
    assert registry.get_rule("nope") is None


def test_unregister(registry: OutputRegistry) -> None:
    registry.unregister("htx")
    assert registry.get_rule("htx") is None
    assert "htx" not in _ids(registry.list_rules())
    assert "htx" not in _ids(registry.get_applicable_rules(EvaluationConfig()))


def test_unregister_unknown_rule_is_a_noop(registry: OutputRegistry) -> None:
    registry.unregister("nope")
    assert len(registry.list_rules()) == 5


def test_register_replaces_rule_with_same_id(registry: OutputRegistry) -> None:
    replacement = HtxRule()
    registry.register(replacement)
    assert registry.get_rule("htx") is replacement
    assert len(registry.list_rules()) == 5


class TestApplicableRules:
    def test_all_by_default(self, registry: OutputRegistry) -> None:
        assert len(registry.get_applicable_rules(EvaluationConfig())) == 5

    def test_enabled_keeps_priority_order(self, registry: OutputRegistry) -> None:
        config = EvaluationConfig(enabled_outputs=["day", "htx"])
        assert _ids(registry.get_applicable_rules(config)) == ["htx", "day"]

    def test_disabled_wins_over_enabled(self, registry: OutputRegistry) -> None:
        config = EvaluationConfig(enabled_outputs=["htx", "hty"], disabled_outputs=["hty"])
        assert _ids(registry.get_applicable_rules(config)) == ["htx"]
