"""BrewEngine: scores a brewed drink against its recipe."""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType

from brew_engine.catalog import RecipeCatalog, build_catalog
from brew_engine.conditions import first_failed_condition
from brew_engine.math.scoring import round_score
from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.brew_result import BrewResult
from brew_engine.models.enums import (
    ACCEPTABLE_THRESHOLD,
    DECENT_THRESHOLD,
    DEFAULT_BLOOM_TIME_S,
    DEFAULT_BREW_TIME_S,
    DEFAULT_ESPRESSO_TIME_S,
    DEFAULT_FOAM_PCT,
    DEFAULT_GRIND,
    DEFAULT_MILK_TEMP_C,
    DEFAULT_MILK_TYPE,
    DEFAULT_TEMP_C,
    EXCELLENT_THRESHOLD,
    GOOD_THRESHOLD,
    POOR_THRESHOLD,
    DrinkCategory,
    ParameterField,
)
from brew_engine.models.evaluation_trace import EvaluationTrace, RuleOutcome, RuleStatus
from brew_engine.models.rule import EvaluationContext
from brew_engine.validation import ideal_parameters, validate_brew_parameters

logger = logging.getLogger(__name__)

_BASE_REQUIRED = (
    ParameterField.GRIND_SIZE,
    ParameterField.TEMPERATURE,
    ParameterField.BREW_TIME,
)
_MILK_REQUIRED = (
    ParameterField.MILK_TYPE,
    ParameterField.MILK_TEMP,
    ParameterField.FOAM_AMOUNT,
)


def generate_feedback(quality: int, drink_name: str) -> str:
    """Pick the one-sentence verdict for an aggregate quality score."""
    if quality >= EXCELLENT_THRESHOLD:
        return f"Perfect {drink_name}. Your customer is delighted."
    if quality >= GOOD_THRESHOLD:
        return f"Well-crafted {drink_name}. Very close to ideal."
    if quality >= ACCEPTABLE_THRESHOLD:
        return f"Good {drink_name}. Solid technique with minor issues."
    if quality >= DECENT_THRESHOLD:
        return f"Acceptable {drink_name}, but could use improvement."
    if quality >= POOR_THRESHOLD:
        return f"Below average {drink_name}. Check your parameters."
    return f"Poor {drink_name}. Way off the mark."


class BrewEngine:
    """Evaluates brew parameters against the recipe catalog.

    The catalog is built and validated when the engine is created, so a
    malformed recipe stops startup instead of surfacing mid-shift. After
    that the engine holds no mutable state; evaluate() is a pure function
    of its arguments.

    Usage:
        engine = BrewEngine()
        result = engine.evaluate("latte", params)
        result, trace = engine.evaluate_with_trace("latte", params)
    """

    def __init__(self, catalog: RecipeCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else build_catalog()

    @property
    def drink_ids(self) -> tuple[str, ...]:
        return self.catalog.drink_ids

    def evaluate(self, drink_id: str, params: BrewParameters) -> BrewResult:
        """Score one drink.

        Args:
            drink_id: Catalog identifier, e.g. ``"latte"``.
            params: The brew as the barista made it.

        Returns:
            A fresh BrewResult.

        Raises:
            ParameterRangeError: a parameter is outside its physical range.
            UnknownDrinkError: the catalog has no such drink.
        """
        result, _ = self.evaluate_with_trace(drink_id, params)
        return result

    def evaluate_with_trace(
        self, drink_id: str, params: BrewParameters
    ) -> tuple[BrewResult, EvaluationTrace]:
        """Score one drink and return the per-rule audit trail alongside."""
        validate_brew_parameters(params)

        recipe = self.catalog.resolve(drink_id)
        context = EvaluationContext(
            drink_id=drink_id,
            drink_category=recipe.category,
            recipe=recipe,
        )

        outcomes: list[RuleOutcome] = []
        breakdown: dict[str, int] = {}
        applied: list[str] = []
        total_weight = 0.0
        weighted_score = 0.0

        for rule in recipe.rules:
            failed = first_failed_condition(rule.conditions, params, context)
            if failed is not None:
                outcomes.append(
                    RuleOutcome(
                        rule_id=rule.rule_id,
                        name=rule.name,
                        status=RuleStatus.SKIPPED,
                        weight=rule.weight,
                        explanation=f"Condition not met: {failed.describe()}",
                    )
                )
                continue

            score = rule.score(params, context)
            breakdown[rule.name] = round_score(score)
            applied.append(rule.rule_id)
            total_weight += rule.weight
            weighted_score += score * rule.weight
            outcomes.append(
                RuleOutcome(
                    rule_id=rule.rule_id,
                    name=rule.name,
                    status=RuleStatus.APPLIED,
                    weight=rule.weight,
                    score=score,
                    feedback=rule.feedback(score) if rule.feedback else "",
                )
            )

        # Average over the rules that applied, not the recipe's full weight
        if total_weight > 0:
            quality = round_score(weighted_score / total_weight)
        else:
            logger.warning("No rule applied for %s; quality defaults to 0", drink_id)
            quality = 0

        result = BrewResult(
            quality=quality,
            feedback=generate_feedback(quality, recipe.name),
            breakdown=MappingProxyType(breakdown),
            applied_rules=tuple(applied),
        )
        trace = EvaluationTrace(
            drink_id=drink_id,
            rule_outcomes=tuple(outcomes),
            total_weight=total_weight,
            weighted_score=weighted_score,
        )
        logger.debug(
            "Evaluated %s: quality=%d applied=%s", drink_id, quality, ",".join(applied)
        )
        return result, trace

    # ------------------------------------------------------------------
    # Parameter helpers for the brewing UI
    # ------------------------------------------------------------------

    def ideal_parameters(self, drink_id: str) -> BrewParameters:
        """Parameters that hit every ideal in the drink's recipe."""
        return ideal_parameters(self.catalog.resolve(drink_id))

    def default_parameters(self, drink_id: str) -> BrewParameters:
        """Neutral starting point for the brewing controls, not the answer."""
        recipe = self.catalog.resolve(drink_id)
        espresso = recipe.category == DrinkCategory.ESPRESSO_BASED
        milk = recipe.uses_milk
        return BrewParameters(
            grind_size=DEFAULT_GRIND,
            temperature=DEFAULT_TEMP_C,
            brew_time=DEFAULT_ESPRESSO_TIME_S if espresso else DEFAULT_BREW_TIME_S,
            bloom_time=DEFAULT_BLOOM_TIME_S if recipe.uses_bloom else None,
            milk_type=DEFAULT_MILK_TYPE if milk else None,
            milk_temp=DEFAULT_MILK_TEMP_C if milk else None,
            foam_amount=DEFAULT_FOAM_PCT if milk else None,
        )

    def required_parameters(self, drink_id: str) -> tuple[ParameterField, ...]:
        """Which parameter fields the brewing UI must collect for this drink."""
        recipe = self.catalog.resolve(drink_id)
        fields = list(_BASE_REQUIRED)
        if recipe.uses_milk:
            fields.extend(_MILK_REQUIRED)
        if recipe.uses_bloom:
            fields.append(ParameterField.BLOOM_TIME)
        return tuple(fields)


@lru_cache(maxsize=1)
def default_engine() -> BrewEngine:
    """Process-wide engine over the built-in catalog, built on first use."""
    return BrewEngine()


def evaluate(drink_id: str, params: BrewParameters) -> BrewResult:
    """Score a drink with the built-in catalog."""
    return default_engine().evaluate(drink_id, params)
