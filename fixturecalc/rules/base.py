"""Abstract base class for all fixture output rules.

Every fixture output is computed by one rule. Rules are:
- Independent: no rule reads another rule's result
- Mode-aware: each rule declares the inputs it needs per primary dimension mode
- Pure: compute() depends only on the evaluation context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from fixturecalc.core.range_validator import RangeValidator
from fixturecalc.models import EvaluationContext, PrimaryDimensionMode, Verdict


class OutputRule(ABC):
    """
    Base class for all fixture output rules.

    Subclasses implement `required_fields()` and `compute()`.
    The evaluator checks the required fields against the context, calls
    `compute()` only when all are present and valid, rounds the result,
    and passes it to `classify()`.
    """

    # Lower priority = listed first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this output (e.g., 'htx')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable label (e.g., 'HTX')."""
        ...

    @abstractmethod
    def required_fields(self, mode: PrimaryDimensionMode) -> tuple[str, ...]:
        """Input fields this output needs while `mode` is active."""
        ...

    @abstractmethod
    def compute(self, context: EvaluationContext) -> float:
        """
        Compute the raw (unrounded) output.

        Only called once every required field is set and valid. May raise
        ValueError or ZeroDivisionError on a domain error.
        """
        ...

    def classify(
        self, value: float, context: EvaluationContext, validator: RangeValidator,
    ) -> Verdict:
        """Range verdict for the rounded value."""
        return validator.check(self.get_id(), value)
