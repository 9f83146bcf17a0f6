"""Espresso-based drinks: espresso, americano, and the milk drinks built on a shot.

The milk drinks share one rule layout (grind, shot temperature, shot time,
milk temperature, foam) and differ only in weights, foam target and notes.
"""

from __future__ import annotations

from brew_engine.models.enums import DrinkCategory, GrindSize
from brew_engine.models.recipe import Recipe, Tolerances
from brew_engine.models.rule import FeedbackFunction, Rule
from brew_engine.recipes.builders import (
    brew_time_rule,
    category_is,
    drink_is,
    foam_rule,
    grind_rule,
    milk_temp_rule,
    temperature_rule,
    three_tier_feedback,
    two_tier_feedback,
)

# Every espresso-based drink pulls the same shot
_SHOT_GRIND = GrindSize.FINE
_SHOT_TEMP_C = 93
_SHOT_TIME_S = 25
_SHOT_TOLERANCES = Tolerances(temp=3, time=3)
_MILK_TOLERANCES = Tolerances(temp=3, time=3, milk_temp=6, foam=15)
_STEAMED_MILK_C = 66


def _milk_drink_rules(
    drink_id: str,
    prefix: str,
    *,
    grind: float,
    temp: float,
    time: float,
    milk_temp: float,
    foam: float,
    milk_feedback: FeedbackFunction | None = None,
    foam_feedback: FeedbackFunction | None = None,
) -> tuple[Rule, ...]:
    gate = drink_is(drink_id)
    return (
        grind_rule(f"{prefix}_grind", grind, gate),
        temperature_rule(f"{prefix}_espresso_temp", temp, gate, name="Espresso Temperature"),
        brew_time_rule(f"{prefix}_espresso_time", time, gate, name="Espresso Time"),
        milk_temp_rule(f"{prefix}_milk_temp", milk_temp, gate, feedback=milk_feedback),
        foam_rule(f"{prefix}_foam", foam, gate, feedback=foam_feedback),
    )


_ESPRESSO_GATE = category_is(DrinkCategory.ESPRESSO_BASED)

ESPRESSO = Recipe(
    drink_id="espresso",
    name="Espresso",
    category=DrinkCategory.ESPRESSO_BASED,
    description="A concentrated shot of pure coffee perfection",
    ideal_grind=_SHOT_GRIND,
    ideal_temp=_SHOT_TEMP_C,
    ideal_brew_time=_SHOT_TIME_S,
    tolerances=_SHOT_TOLERANCES,
    rules=(
        grind_rule(
            "espresso_grind",
            0.4,
            _ESPRESSO_GATE,
            feedback=three_tier_feedback(
                "Perfect grind size!", "Grind size acceptable", "Grind needs adjustment"
            ),
        ),
        temperature_rule("espresso_temp", 0.3, _ESPRESSO_GATE),
        brew_time_rule("espresso_time", 0.3, _ESPRESSO_GATE),
    ),
)

LATTE = Recipe(
    drink_id="latte",
    name="Latte",
    category=DrinkCategory.ESPRESSO_BASED,
    description="Espresso with steamed milk and light foam",
    ideal_grind=_SHOT_GRIND,
    ideal_temp=_SHOT_TEMP_C,
    ideal_brew_time=_SHOT_TIME_S,
    ideal_milk_temp=_STEAMED_MILK_C,
    ideal_foam_amount=20,
    tolerances=_MILK_TOLERANCES,
    rules=_milk_drink_rules(
        "latte",
        "latte",
        grind=0.25,
        temp=0.2,
        time=0.15,
        milk_temp=0.25,
        foam=0.15,
        milk_feedback=two_tier_feedback("Perfect microfoam!", "Milk temp off"),
    ),
)

CAPPUCCINO = Recipe(
    drink_id="cappuccino",
    name="Cappuccino",
    category=DrinkCategory.ESPRESSO_BASED,
    description="Equal parts espresso, steamed milk, and foam",
    ideal_grind=_SHOT_GRIND,
    ideal_temp=_SHOT_TEMP_C,
    ideal_brew_time=_SHOT_TIME_S,
    ideal_milk_temp=_STEAMED_MILK_C,
    ideal_foam_amount=60,
    tolerances=_MILK_TOLERANCES,
    rules=_milk_drink_rules(
        "cappuccino",
        "capp",
        grind=0.25,
        temp=0.2,
        time=0.15,
        milk_temp=0.2,
        foam=0.2,
        foam_feedback=two_tier_feedback("Perfect cappuccino foam!", "Foam needs work"),
    ),
)

MOCHA = Recipe(
    drink_id="mocha",
    name="Mocha",
    category=DrinkCategory.ESPRESSO_BASED,
    description="Espresso with chocolate and steamed milk",
    ideal_grind=_SHOT_GRIND,
    ideal_temp=_SHOT_TEMP_C,
    ideal_brew_time=_SHOT_TIME_S,
    ideal_milk_temp=_STEAMED_MILK_C,
    ideal_foam_amount=30,
    tolerances=_MILK_TOLERANCES,
    rules=_milk_drink_rules(
        "mocha",
        "mocha",
        grind=0.25,
        temp=0.2,
        time=0.15,
        milk_temp=0.25,
        foam=0.15,
    ),
)

_AMERICANO_GATE = drink_is("americano")

AMERICANO = Recipe(
    drink_id="americano",
    name="Americano",
    category=DrinkCategory.ESPRESSO_BASED,
    description="Espresso with hot water",
    ideal_grind=_SHOT_GRIND,
    ideal_temp=_SHOT_TEMP_C,
    ideal_brew_time=_SHOT_TIME_S,
    tolerances=_SHOT_TOLERANCES,
    rules=(
        grind_rule("americano_grind", 0.4, _AMERICANO_GATE),
        temperature_rule("americano_temp", 0.3, _AMERICANO_GATE, name="Espresso Temperature"),
        brew_time_rule("americano_time", 0.3, _AMERICANO_GATE),
    ),
)

RECIPES = (ESPRESSO, LATTE, CAPPUCCINO, MOCHA, AMERICANO)
