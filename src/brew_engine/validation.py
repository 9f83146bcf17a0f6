"""Validation: global parameter ranges per call, recipe integrity at catalog build.

Parameter validation runs at the start of every evaluate() call. Recipe
validation runs once, when a recipe is registered in a catalog.
"""

from __future__ import annotations

import logging
import math
from collections import Counter

from brew_engine.exceptions import CatalogValidationError, ParameterRangeError
from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.enums import (
    BLOOM_TIME_MIN_S,
    BREW_TIME_MIN_S,
    FOAM_MAX_PCT,
    FOAM_MIN_PCT,
    MILK_TEMP_MAX_C,
    MILK_TEMP_MIN_C,
    TEMP_MAX_C,
    TEMP_MIN_C,
    WEIGHT_SUM_TOLERANCE,
    MilkType,
    ParameterField,
)
from brew_engine.models.recipe import Recipe

logger = logging.getLogger(__name__)

# Optional measurements whose rules need the recipe to define an ideal
_OPTIONAL_IDEALS = {
    ParameterField.BLOOM_TIME: "ideal_bloom_time",
    ParameterField.MILK_TEMP: "ideal_milk_temp",
    ParameterField.FOAM_AMOUNT: "ideal_foam_amount",
}


def _check_range(
    field: str,
    value: float,
    minimum: float | None,
    maximum: float | None,
) -> None:
    if not math.isfinite(value):
        raise ParameterRangeError(field, value, minimum, maximum)
    if minimum is not None and value < minimum:
        raise ParameterRangeError(field, value, minimum, maximum)
    if maximum is not None and value > maximum:
        raise ParameterRangeError(field, value, minimum, maximum)


def validate_brew_parameters(params: BrewParameters) -> None:
    """Reject parameters outside the global physical ranges.

    Raises:
        ParameterRangeError: naming the first offending field, its value
            and the valid range.
    """
    _check_range("temperature", params.temperature, TEMP_MIN_C, TEMP_MAX_C)
    _check_range("brew_time", params.brew_time, BREW_TIME_MIN_S, None)

    if params.bloom_time is not None:
        _check_range("bloom_time", params.bloom_time, BLOOM_TIME_MIN_S, None)
    if params.milk_temp is not None:
        _check_range("milk_temp", params.milk_temp, MILK_TEMP_MIN_C, MILK_TEMP_MAX_C)
    if params.foam_amount is not None:
        _check_range("foam_amount", params.foam_amount, FOAM_MIN_PCT, FOAM_MAX_PCT)


def ideal_parameters(recipe: Recipe) -> BrewParameters:
    """Build the parameter set that hits every one of the recipe's ideals."""
    return BrewParameters(
        grind_size=recipe.ideal_grind,
        temperature=recipe.ideal_temp,
        brew_time=recipe.ideal_brew_time,
        bloom_time=recipe.ideal_bloom_time,
        milk_type=MilkType.WHOLE if recipe.uses_milk else None,
        milk_temp=recipe.ideal_milk_temp,
        foam_amount=recipe.ideal_foam_amount,
    )


def validate_rule_weights(recipe: Recipe) -> None:
    """Check that a recipe's rule weights sum to 1.0 within tolerance.

    Raises:
        CatalogValidationError: listing every rule id with its weight so the
            author can see which one to adjust.
    """
    weights = tuple((rule.rule_id, rule.weight) for rule in recipe.rules)
    total = recipe.total_weight

    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        listing = ", ".join(f"{rule_id}={weight:g}" for rule_id, weight in weights)
        message = (
            f'Recipe "{recipe.name}" rule weights sum to {total:.3f}, must be 1.0. '
            f"Rules: {listing}"
        )
        logger.error(message)
        raise CatalogValidationError(message, recipe_name=recipe.name, weights=weights)


def validate_recipe(recipe: Recipe) -> None:
    """Run every structural check on a single recipe.

    Raises:
        CatalogValidationError: on the first defect found.
    """
    weights = tuple((rule.rule_id, rule.weight) for rule in recipe.rules)

    def fail(detail: str) -> None:
        message = f'Recipe "{recipe.name}" is invalid: {detail}'
        logger.error(message)
        raise CatalogValidationError(message, recipe_name=recipe.name, weights=weights)

    negative = [rule_id for rule_id, weight in weights if weight < 0]
    if negative:
        fail(f"negative rule weight for {', '.join(negative)}")

    # Breakdown is keyed by display name, so names must be unique too
    for attr, label in (("rule_id", "rule id"), ("name", "rule name")):
        counts = Counter(getattr(rule, attr) for rule in recipe.rules)
        duplicates = sorted(key for key, count in counts.items() if count > 1)
        if duplicates:
            fail(f"duplicate {label} {', '.join(duplicates)}")

    tolerances = recipe.tolerances
    for name in ("temp", "time", "bloom", "milk_temp", "foam"):
        value = getattr(tolerances, name)
        if value is not None and value <= 0:
            fail(f"tolerance {name} must be positive, got {value}")

    for rule in recipe.rules:
        if rule.measures is None:
            continue
        attr = _OPTIONAL_IDEALS.get(rule.measures)
        if attr is not None and getattr(recipe, attr) is None:
            fail(f"rule {rule.rule_id} scores {rule.measures.attribute} but {attr} is not set")

    try:
        validate_brew_parameters(ideal_parameters(recipe))
    except ParameterRangeError as exc:
        fail(f"ideal value out of physical range: {exc}")

    validate_rule_weights(recipe)
