"""Pour-over: manual drip brewing, the only method that scores the bloom."""

from __future__ import annotations

from brew_engine.models.enums import DrinkCategory, GrindSize
from brew_engine.models.recipe import Recipe, Tolerances
from brew_engine.recipes.builders import (
    bloom_rule,
    brew_time_rule,
    category_is,
    grind_rule,
    temperature_rule,
)

_GATE = category_is(DrinkCategory.POUR_OVER)

POUROVER = Recipe(
    drink_id="pourover",
    name="Pour Over",
    category=DrinkCategory.POUR_OVER,
    description="Clean, bright coffee with manual pouring technique",
    ideal_grind=GrindSize.MEDIUM,
    ideal_temp=96,
    ideal_brew_time=180,
    ideal_bloom_time=30,
    tolerances=Tolerances(temp=3, time=20, bloom=10),
    rules=(
        grind_rule("pourover_grind", 0.35, _GATE),
        temperature_rule("pourover_temp", 0.25, _GATE, name="Water Temperature"),
        bloom_rule("pourover_bloom", 0.2, _GATE),
        brew_time_rule("pourover_time", 0.2, _GATE, name="Total Brew Time"),
    ),
)

RECIPES = (POUROVER,)
