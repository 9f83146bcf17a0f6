"""Evaluation trace: per-rule audit trail of how a quality score was reached."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto


class RuleStatus(IntEnum):
    """Whether a rule's conditions held for this call."""

    APPLIED = auto()
    SKIPPED = auto()


@dataclass(frozen=True)
class RuleOutcome:
    """Record of a single rule during an engine call."""

    rule_id: str
    name: str
    status: RuleStatus
    weight: float
    score: float | None = None
    feedback: str = ""
    explanation: str = ""


@dataclass(frozen=True)
class EvaluationTrace:
    """Complete audit trail for a single engine.evaluate_with_trace() call.

    Holds every rule of the recipe in evaluation order, including the ones
    whose conditions failed, so a surprising score can be explained.
    """

    drink_id: str
    rule_outcomes: tuple[RuleOutcome, ...] = field(default_factory=tuple)
    total_weight: float = 0.0
    weighted_score: float = 0.0

    @property
    def applied(self) -> tuple[RuleOutcome, ...]:
        return tuple(o for o in self.rule_outcomes if o.status == RuleStatus.APPLIED)

    @property
    def skipped(self) -> tuple[RuleOutcome, ...]:
        return tuple(o for o in self.rule_outcomes if o.status == RuleStatus.SKIPPED)

    @property
    def rule_feedback(self) -> dict[str, str]:
        """Per-rule notes keyed by display name, for rules that produced one."""
        return {o.name: o.feedback for o in self.rule_outcomes if o.feedback}
