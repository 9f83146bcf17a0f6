"""Rules, their conditions, and the per-call evaluation context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Union

from brew_engine.models.enums import ComparisonOperator, ContextField, DrinkCategory, ParameterField

if TYPE_CHECKING:
    from brew_engine.models.brew_parameters import BrewParameters
    from brew_engine.models.recipe import Recipe


# A condition reads either a brew parameter or a context field, never both
ConditionSubject = Union[ParameterField, ContextField]

ScoringFunction = Callable[["BrewParameters", "EvaluationContext"], float]
FeedbackFunction = Callable[[float], str]


@dataclass(frozen=True)
class Condition:
    """Predicate gating whether a rule applies.

    ``tolerance`` is only read by ComparisonOperator.RANGE.
    """

    subject: ConditionSubject
    operator: ComparisonOperator
    value: object
    tolerance: float = 0.0

    def describe(self) -> str:
        text = f"{self.subject.name.lower()} {self.operator.name.lower()} {_describe_value(self.value)}"
        if self.operator == ComparisonOperator.RANGE:
            text += f" ± {self.tolerance:g}"
        return text


@dataclass(frozen=True)
class Rule:
    """Weighted, conditionally applicable scoring unit within a recipe.

    All conditions must hold (logical AND) for the rule to apply. ``score``
    returns 0-100; ``feedback`` optionally turns that score into a short note.
    ``measures`` names the parameter the score is computed from, if any.
    """

    rule_id: str
    name: str
    weight: float
    score: ScoringFunction
    conditions: tuple[Condition, ...] = field(default_factory=tuple)
    feedback: FeedbackFunction | None = None
    measures: ParameterField | None = None


@dataclass(frozen=True)
class EvaluationContext:
    """Resolved drink information shared by every condition and scoring call."""

    drink_id: str
    drink_category: DrinkCategory
    recipe: Recipe


def _describe_value(value: object) -> str:
    label = getattr(value, "label", None)
    if isinstance(label, str):
        return label
    return str(value)
