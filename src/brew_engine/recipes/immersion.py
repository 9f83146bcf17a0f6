"""Immersion drinks: Aeropress, and the whisked matcha latte.

Matcha has no grind rule; the powder is not ground at the bar.
"""

from __future__ import annotations

from brew_engine.models.enums import DrinkCategory, GrindSize
from brew_engine.models.recipe import Recipe, Tolerances
from brew_engine.recipes.builders import (
    brew_time_rule,
    category_is,
    drink_is,
    foam_rule,
    grind_rule,
    milk_temp_rule,
    temperature_rule,
    three_tier_feedback,
)

_IMMERSION_GATE = category_is(DrinkCategory.IMMERSION)

AEROPRESS = Recipe(
    drink_id="aeropress",
    name="Aeropress",
    category=DrinkCategory.IMMERSION,
    description="Smooth, full-bodied coffee with pressure brewing",
    ideal_grind=GrindSize.MEDIUM_FINE,
    ideal_temp=85,
    ideal_brew_time=90,
    tolerances=Tolerances(temp=4, time=15),
    rules=(
        grind_rule("immersion_grind", 0.4, _IMMERSION_GATE),
        temperature_rule("immersion_temp", 0.3, _IMMERSION_GATE, name="Water Temperature"),
        brew_time_rule("immersion_time", 0.3, _IMMERSION_GATE, name="Steep Time"),
    ),
)

_MATCHA_GATE = drink_is("matcha")

MATCHA = Recipe(
    drink_id="matcha",
    name="Matcha Latte",
    category=DrinkCategory.IMMERSION,
    description="Whisked matcha powder with steamed milk",
    ideal_grind=GrindSize.MEDIUM,
    ideal_temp=79,
    ideal_brew_time=30,
    ideal_milk_temp=66,
    ideal_foam_amount=25,
    tolerances=Tolerances(temp=4, time=10, milk_temp=6, foam=15),
    rules=(
        temperature_rule(
            "matcha_temp",
            0.4,
            _MATCHA_GATE,
            name="Water Temperature",
            feedback=three_tier_feedback(
                "Perfect matcha temperature!", "Temperature acceptable", "Too hot for matcha"
            ),
        ),
        milk_temp_rule("matcha_milk_temp", 0.3, _MATCHA_GATE),
        foam_rule("matcha_foam", 0.3, _MATCHA_GATE),
    ),
)

RECIPES = (AEROPRESS, MATCHA)
