"""Data models for the brew rule engine."""

from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.brew_result import BrewResult
from brew_engine.models.enums import (
    ComparisonOperator,
    ContextField,
    DrinkCategory,
    GrindSize,
    MilkType,
    ParameterField,
)
from brew_engine.models.evaluation_trace import EvaluationTrace, RuleOutcome, RuleStatus
from brew_engine.models.recipe import Recipe, Tolerances
from brew_engine.models.rule import Condition, EvaluationContext, Rule

__all__ = [
    "BrewParameters",
    "BrewResult",
    "ComparisonOperator",
    "Condition",
    "ContextField",
    "DrinkCategory",
    "EvaluationContext",
    "EvaluationTrace",
    "GrindSize",
    "MilkType",
    "ParameterField",
    "Recipe",
    "Rule",
    "RuleOutcome",
    "RuleStatus",
    "Tolerances",
]
