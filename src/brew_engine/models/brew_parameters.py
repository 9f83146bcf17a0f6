"""Frozen brew parameters: the caller's measured settings for one drink."""

from __future__ import annotations

from dataclasses import dataclass

from brew_engine.models.enums import GrindSize, MilkType


@dataclass(frozen=True)
class BrewParameters:
    """Immutable snapshot of how a drink was brewed.

    The optional fields only matter for recipes that score them: bloom for
    pour-over, milk fields for milk drinks. Leaving one out makes the
    dependent rule inapplicable (or score zero), never an error.
    """

    grind_size: GrindSize
    temperature: float  # Water / extraction temperature, °C
    brew_time: float  # Extraction or steep time, seconds

    bloom_time: float | None = None  # seconds
    milk_type: MilkType | None = None
    milk_temp: float | None = None  # °C
    foam_amount: float | None = None  # percent of the cup, 0-100
