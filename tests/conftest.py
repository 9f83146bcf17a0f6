"""Shared test fixtures: engine, catalog, and representative brews."""

from __future__ import annotations

from typing import Callable

import pytest

from brew_engine.catalog import RecipeCatalog, build_catalog
from brew_engine.engine import BrewEngine
from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.enums import GrindSize, MilkType


@pytest.fixture
def catalog() -> RecipeCatalog:
    return build_catalog()


@pytest.fixture
def engine(catalog: RecipeCatalog) -> BrewEngine:
    return BrewEngine(catalog)


@pytest.fixture
def espresso_ideal() -> BrewParameters:
    """Textbook shot: fine grind, 93°C, 25 s."""
    return BrewParameters(grind_size=GrindSize.FINE, temperature=93, brew_time=25)


@pytest.fixture
def espresso_way_off() -> BrewParameters:
    """Coarse grind, 13°C too cold, 10 s too long."""
    return BrewParameters(grind_size=GrindSize.COARSE, temperature=80, brew_time=35)


@pytest.fixture
def latte_ideal() -> BrewParameters:
    """Latte with every milk field at its target."""
    return BrewParameters(
        grind_size=GrindSize.FINE,
        temperature=93,
        brew_time=25,
        milk_type=MilkType.WHOLE,
        milk_temp=66,
        foam_amount=20,
    )


@pytest.fixture
def pourover_ideal() -> BrewParameters:
    """Medium grind, 96°C, 3 minutes with a 30 s bloom."""
    return BrewParameters(
        grind_size=GrindSize.MEDIUM,
        temperature=96,
        brew_time=180,
        bloom_time=30,
    )


@pytest.fixture
def make_espresso() -> Callable[..., BrewParameters]:
    """Factory: ideal espresso with selected fields overridden."""

    def _make(**overrides: object) -> BrewParameters:
        fields: dict[str, object] = {
            "grind_size": GrindSize.FINE,
            "temperature": 93,
            "brew_time": 25,
        }
        fields.update(overrides)
        return BrewParameters(**fields)  # type: ignore[arg-type]

    return _make
