"""Recipe definition: ideal values, tolerances, and the weighted rule list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from brew_engine.models.enums import DrinkCategory, GrindSize

if TYPE_CHECKING:
    from brew_engine.models.rule import Rule


@dataclass(frozen=True)
class Tolerances:
    """Half-width of the acceptable band for each continuously scored attribute."""

    temp: float
    time: float
    bloom: float | None = None
    milk_temp: float | None = None
    foam: float | None = None


@dataclass(frozen=True)
class Recipe:
    """Catalog entry for one drink.

    Rule weights must sum to 1.0; the catalog refuses to register a
    recipe that breaks this.
    """

    drink_id: str
    name: str
    category: DrinkCategory
    description: str

    ideal_grind: GrindSize
    ideal_temp: float
    ideal_brew_time: float
    tolerances: Tolerances
    rules: tuple[Rule, ...] = field(default_factory=tuple)

    ideal_bloom_time: float | None = None
    ideal_milk_temp: float | None = None
    ideal_foam_amount: float | None = None

    @property
    def uses_milk(self) -> bool:
        return self.ideal_milk_temp is not None or self.ideal_foam_amount is not None

    @property
    def uses_bloom(self) -> bool:
        return self.ideal_bloom_time is not None

    @property
    def total_weight(self) -> float:
        return sum(rule.weight for rule in self.rules)
