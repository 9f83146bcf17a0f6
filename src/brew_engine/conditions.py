"""Condition matching: decides which of a recipe's rules apply to a brew."""

from __future__ import annotations

from enum import Enum
from numbers import Real
from typing import Iterable

from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.enums import ComparisonOperator, ContextField, GrindSize
from brew_engine.models.rule import Condition, ConditionSubject, EvaluationContext


def resolve_subject(
    subject: ConditionSubject,
    params: BrewParameters,
    context: EvaluationContext,
) -> object | None:
    """Look up the value a condition talks about.

    Context fields come from the EvaluationContext, everything else from the
    brew parameters. Absent optional parameters resolve to None.
    """
    source: object = context if isinstance(subject, ContextField) else params
    return getattr(source, subject.attribute)


def _is_number(value: object) -> bool:
    # Grind size is the only ordinal enum; other enums are categorical
    if isinstance(value, Enum) and not isinstance(value, GrindSize):
        return False
    return isinstance(value, Real) and not isinstance(value, bool)


def _same_kind(actual: object, expected: object) -> bool:
    """Enum operands only compare against members of the same enum."""
    if isinstance(actual, Enum) or isinstance(expected, Enum):
        return type(actual) is type(expected)
    return True


def evaluate_condition(
    condition: Condition,
    params: BrewParameters,
    context: EvaluationContext,
) -> bool:
    """Evaluate one condition. An absent value never satisfies a condition."""
    actual = resolve_subject(condition.subject, params, context)
    if actual is None:
        return False

    op = condition.operator
    expected = condition.value

    if op == ComparisonOperator.EQUALS:
        return _same_kind(actual, expected) and actual == expected
    if op == ComparisonOperator.NOT_EQUALS:
        return not _same_kind(actual, expected) or actual != expected

    # Ordering operators only make sense on numbers (grind size included)
    if not (_is_number(actual) and _is_number(expected)):
        return False

    if op == ComparisonOperator.LESS_THAN:
        return actual < expected  # type: ignore[operator]
    if op == ComparisonOperator.GREATER_THAN:
        return actual > expected  # type: ignore[operator]
    if op == ComparisonOperator.RANGE:
        return abs(actual - expected) <= condition.tolerance  # type: ignore[operator]
    return False


def first_failed_condition(
    conditions: Iterable[Condition],
    params: BrewParameters,
    context: EvaluationContext,
) -> Condition | None:
    """Return the first condition that does not hold, or None if all hold."""
    for condition in conditions:
        if not evaluate_condition(condition, params, context):
            return condition
    return None


def conditions_hold(
    conditions: Iterable[Condition],
    params: BrewParameters,
    context: EvaluationContext,
) -> bool:
    """Logical AND over all conditions, short-circuiting on the first failure."""
    return first_failed_condition(conditions, params, context) is None
