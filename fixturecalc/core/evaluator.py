"""Main fixture evaluator: orchestrates validation, resolution and output rules."""

from __future__ import annotations
import math

from fixturecalc.core.formulas import round2
from fixturecalc.core.input_validator import InputValidator
from fixturecalc.core.range_validator import RangeValidator
from fixturecalc.core.registry import OutputRegistry
from fixturecalc.core.resolver import GeometryResolver
from fixturecalc.models import (
    EvaluationConfig, EvaluationContext, FixtureOutputs, FrameParameters,
    OutputResult, OutputStatus, PrimaryDimensionMode, FIELD_LABELS,
)
from fixturecalc.rules.base import OutputRule
from fixturecalc.utils.logging import get_logger

logger = get_logger(__name__)


class FixtureEvaluator:
    """
    Stateless fixture evaluator.

    Takes a mode + parameters, validates and resolves them, runs every
    selected output rule independently and returns FixtureOutputs.
    """

    def __init__(self, registry: OutputRegistry) -> None:
        self.registry = registry
        self.input_validator = InputValidator()
        self.resolver = GeometryResolver()
        self.range_validator = RangeValidator()

    def evaluate(
        self,
        mode: PrimaryDimensionMode,
        params: FrameParameters,
        config: EvaluationConfig | None = None,
    ) -> FixtureOutputs:
        if config is None:
            config = EvaluationConfig()

        # Fields outside the active mode are treated as absent
        masked = params.for_mode(mode)
        validation = self.input_validator.validate(masked, mode)

        context = EvaluationContext(
            mode=mode,
            params=masked,
            config=config,
            invalid_fields=validation.invalid_fields,
        )

        # Resolution phase: stack/reach for modes that need it
        self.resolver.resolve(context)

        # Output phase: every rule on its own
        results: dict[str, OutputResult] = {}
        for rule in self.registry.get_applicable_rules(config):
            results[rule.get_id()] = self._evaluate_rule(rule, context)

        outputs = FixtureOutputs(
            mode=mode.value,
            outputs=results,
            input_errors=validation.errors,
        )
        logger.debug(
            "fixture_evaluated",
            mode=mode.value,
            statuses={k: r.status.value for k, r in results.items()},
        )
        return outputs

    def _evaluate_rule(self, rule: OutputRule, context: EvaluationContext) -> OutputResult:
        rule_id = rule.get_id()
        label = rule.get_name()

        waiting_on = context.blocking_fields(rule.required_fields(context.mode))
        if waiting_on:
            return OutputResult(
                id=rule_id,
                label=label,
                status=OutputStatus.INCOMPLETE,
                message="Waiting on " + ", ".join(FIELD_LABELS[f] for f in waiting_on),
                waiting_on=waiting_on,
            )

        try:
            raw = rule.compute(context)
            if not math.isfinite(raw):
                raise ValueError(f"{label} is not a finite number")
        except (ValueError, ZeroDivisionError) as exc:
            logger.warning("output_domain_error", output=rule_id, error=str(exc))
            return OutputResult(
                id=rule_id,
                label=label,
                status=OutputStatus.ERROR,
                message=str(exc),
            )

        value = round2(raw)
        verdict = rule.classify(value, context, self.range_validator)
        return OutputResult(
            id=rule_id,
            label=label,
            value=value,
            status=verdict.status,
            message=verdict.message,
        )
