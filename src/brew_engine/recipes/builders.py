"""Shared building blocks for recipe rule lists.

Grind rules always use the categorical grind score; every other rule uses
the tolerance score against the recipe's own ideal and tolerance.
"""

from __future__ import annotations

from brew_engine.math.scoring import grind_score, tolerance_score
from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.enums import (
    DEFAULT_BLOOM_TOLERANCE,
    DEFAULT_FOAM_TOLERANCE,
    DEFAULT_MILK_TEMP_TOLERANCE,
    RULE_FEEDBACK_GREAT,
    RULE_FEEDBACK_OK,
    ComparisonOperator,
    ContextField,
    DrinkCategory,
    MilkType,
    ParameterField,
)
from brew_engine.models.rule import Condition, EvaluationContext, FeedbackFunction, Rule

# ---------------------------------------------------------------------------
# Conditions
# ---------------------------------------------------------------------------


def drink_is(drink_id: str) -> Condition:
    return Condition(ContextField.DRINK_ID, ComparisonOperator.EQUALS, drink_id)


def category_is(category: DrinkCategory) -> Condition:
    return Condition(ContextField.DRINK_CATEGORY, ComparisonOperator.EQUALS, category)


def has_milk() -> Condition:
    """Holds when a milk type was given and it is not NONE."""
    return Condition(ParameterField.MILK_TYPE, ComparisonOperator.NOT_EQUALS, MilkType.NONE)


def has_bloom() -> Condition:
    return Condition(ParameterField.BLOOM_TIME, ComparisonOperator.GREATER_THAN, 0)


# ---------------------------------------------------------------------------
# Scoring functions
# ---------------------------------------------------------------------------


def score_grind(params: BrewParameters, context: EvaluationContext) -> float:
    return grind_score(params.grind_size, context.recipe.ideal_grind)


def score_temperature(params: BrewParameters, context: EvaluationContext) -> float:
    recipe = context.recipe
    return tolerance_score(params.temperature, recipe.ideal_temp, recipe.tolerances.temp)


def score_brew_time(params: BrewParameters, context: EvaluationContext) -> float:
    recipe = context.recipe
    return tolerance_score(params.brew_time, recipe.ideal_brew_time, recipe.tolerances.time)


def score_bloom_time(params: BrewParameters, context: EvaluationContext) -> float:
    recipe = context.recipe
    if params.bloom_time is None or recipe.ideal_bloom_time is None:
        return 0.0
    tolerance = recipe.tolerances.bloom or DEFAULT_BLOOM_TOLERANCE
    return tolerance_score(params.bloom_time, recipe.ideal_bloom_time, tolerance)


def score_milk_temp(params: BrewParameters, context: EvaluationContext) -> float:
    recipe = context.recipe
    if params.milk_temp is None or recipe.ideal_milk_temp is None:
        return 0.0
    tolerance = recipe.tolerances.milk_temp or DEFAULT_MILK_TEMP_TOLERANCE
    return tolerance_score(params.milk_temp, recipe.ideal_milk_temp, tolerance)


def score_foam(params: BrewParameters, context: EvaluationContext) -> float:
    recipe = context.recipe
    if params.foam_amount is None or recipe.ideal_foam_amount is None:
        return 0.0
    tolerance = recipe.tolerances.foam or DEFAULT_FOAM_TOLERANCE
    return tolerance_score(params.foam_amount, recipe.ideal_foam_amount, tolerance)


# ---------------------------------------------------------------------------
# Feedback generators
# ---------------------------------------------------------------------------


def three_tier_feedback(great: str, ok: str, poor: str) -> FeedbackFunction:
    """Note for >=90, >=70, and anything lower."""

    def feedback(score: float) -> str:
        if score >= RULE_FEEDBACK_GREAT:
            return great
        if score >= RULE_FEEDBACK_OK:
            return ok
        return poor

    return feedback


def two_tier_feedback(great: str, poor: str) -> FeedbackFunction:
    """Note for >=90 and anything lower."""

    def feedback(score: float) -> str:
        return great if score >= RULE_FEEDBACK_GREAT else poor

    return feedback


# ---------------------------------------------------------------------------
# Rule factories
# ---------------------------------------------------------------------------


def grind_rule(
    rule_id: str,
    weight: float,
    *conditions: Condition,
    name: str = "Grind Size",
    feedback: FeedbackFunction | None = None,
) -> Rule:
    return Rule(
        rule_id, name, weight, score_grind, tuple(conditions), feedback, ParameterField.GRIND_SIZE
    )


def temperature_rule(
    rule_id: str,
    weight: float,
    *conditions: Condition,
    name: str = "Temperature",
    feedback: FeedbackFunction | None = None,
) -> Rule:
    return Rule(
        rule_id, name, weight, score_temperature, tuple(conditions), feedback, ParameterField.TEMPERATURE
    )


def brew_time_rule(
    rule_id: str,
    weight: float,
    *conditions: Condition,
    name: str = "Brew Time",
    feedback: FeedbackFunction | None = None,
) -> Rule:
    return Rule(
        rule_id, name, weight, score_brew_time, tuple(conditions), feedback, ParameterField.BREW_TIME
    )


def bloom_rule(
    rule_id: str,
    weight: float,
    *conditions: Condition,
    name: str = "Bloom Time",
    feedback: FeedbackFunction | None = None,
) -> Rule:
    """Bloom rules only apply once a positive bloom time is given."""
    return Rule(
        rule_id,
        name,
        weight,
        score_bloom_time,
        (*conditions, has_bloom()),
        feedback,
        ParameterField.BLOOM_TIME,
    )


def milk_temp_rule(
    rule_id: str,
    weight: float,
    *conditions: Condition,
    name: str = "Milk Temperature",
    feedback: FeedbackFunction | None = None,
) -> Rule:
    """Milk rules only apply when the order actually has milk."""
    return Rule(
        rule_id,
        name,
        weight,
        score_milk_temp,
        (*conditions, has_milk()),
        feedback,
        ParameterField.MILK_TEMP,
    )


def foam_rule(
    rule_id: str,
    weight: float,
    *conditions: Condition,
    name: str = "Foam Amount",
    feedback: FeedbackFunction | None = None,
) -> Rule:
    return Rule(
        rule_id,
        name,
        weight,
        score_foam,
        (*conditions, has_milk()),
        feedback,
        ParameterField.FOAM_AMOUNT,
    )
