"""Brew rule engine: scores a brewed drink against its recipe."""

from brew_engine.catalog import RecipeCatalog, build_catalog
from brew_engine.engine import BrewEngine, default_engine, evaluate, generate_feedback
from brew_engine.exceptions import (
    BrewEngineError,
    CatalogValidationError,
    ParameterRangeError,
    UnknownDrinkError,
)
from brew_engine.models import BrewParameters, BrewResult, GrindSize, MilkType

__all__ = [
    "BrewEngine",
    "BrewEngineError",
    "BrewParameters",
    "BrewResult",
    "CatalogValidationError",
    "GrindSize",
    "MilkType",
    "ParameterRangeError",
    "RecipeCatalog",
    "UnknownDrinkError",
    "build_catalog",
    "default_engine",
    "evaluate",
    "generate_feedback",
]
