"""Tests for BrewEngine: full evaluation pipeline."""

from __future__ import annotations

from typing import Callable

import pytest

from brew_engine.catalog import build_catalog
from brew_engine.engine import BrewEngine, default_engine, evaluate, generate_feedback
from brew_engine.exceptions import ParameterRangeError, UnknownDrinkError
from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.enums import DrinkCategory, GrindSize, MilkType, ParameterField
from brew_engine.models.evaluation_trace import RuleStatus
from brew_engine.models.recipe import Recipe, Tolerances
from brew_engine.recipes.builders import drink_is, grind_rule
from brew_engine.recipes.espresso_based import ESPRESSO


class TestEvaluate:
    def test_perfect_espresso(self, engine: BrewEngine, espresso_ideal: BrewParameters) -> None:
        result = engine.evaluate("espresso", espresso_ideal)
        assert result.quality == 100
        assert result.feedback == "Perfect Espresso. Your customer is delighted."
        assert result.breakdown == {"Grind Size": 100, "Temperature": 100, "Brew Time": 100}
        assert result.applied_rules == ("espresso_grind", "espresso_temp", "espresso_time")

    def test_espresso_way_off(self, engine: BrewEngine, espresso_way_off: BrewParameters) -> None:
        result = engine.evaluate("espresso", espresso_way_off)
        assert result.breakdown == {"Grind Size": 10, "Temperature": 0, "Brew Time": 0}
        # 0.4 * 10 = 4
        assert result.quality == 4
        assert result.feedback == "Poor Espresso. Way off the mark."

    @pytest.mark.parametrize(
        "overrides, quality, feedback",
        [
            ({"temperature": 94.5}, 96, "Perfect Espresso. Your customer is delighted."),
            ({"grind_size": GrindSize.MEDIUM_FINE}, 88, "Well-crafted Espresso. Very close to ideal."),
            ({"grind_size": GrindSize.MEDIUM}, 76, "Good Espresso. Solid technique with minor issues."),
            ({"grind_size": GrindSize.MEDIUM_COARSE}, 64, "Acceptable Espresso, but could use improvement."),
            (
                {"grind_size": GrindSize.COARSE, "temperature": 97},
                52,
                "Below average Espresso. Check your parameters.",
            ),
        ],
    )
    def test_feedback_bands(
        self,
        engine: BrewEngine,
        make_espresso: Callable[..., BrewParameters],
        overrides: dict,
        quality: int,
        feedback: str,
    ) -> None:
        result = engine.evaluate("espresso", make_espresso(**overrides))
        assert result.quality == quality
        assert result.feedback == feedback

    def test_breakdown_rounds_half_up(
        self, engine: BrewEngine, make_espresso: Callable[..., BrewParameters]
    ) -> None:
        # 1.5°C off with tolerance 3 → 87.5
        result = engine.evaluate("espresso", make_espresso(temperature=94.5))
        assert result.breakdown["Temperature"] == 88

    def test_ideal_parameters_score_100_for_every_drink(self, engine: BrewEngine) -> None:
        for drink_id in engine.drink_ids:
            result = engine.evaluate(drink_id, engine.ideal_parameters(drink_id))
            assert result.quality == 100, drink_id
            assert all(score == 100 for score in result.breakdown.values()), drink_id

    def test_deterministic(self, engine: BrewEngine, latte_ideal: BrewParameters) -> None:
        assert engine.evaluate("latte", latte_ideal) == engine.evaluate("latte", latte_ideal)

    def test_results_are_fresh_objects(
        self, engine: BrewEngine, espresso_ideal: BrewParameters
    ) -> None:
        first = engine.evaluate("espresso", espresso_ideal)
        second = engine.evaluate("espresso", espresso_ideal)
        assert first == second
        assert first is not second


class TestSkippedRules:
    def test_latte_without_milk_fields(
        self, engine: BrewEngine, espresso_ideal: BrewParameters
    ) -> None:
        result = engine.evaluate("latte", espresso_ideal)
        assert result.applied_rules == ("latte_grind", "latte_espresso_temp", "latte_espresso_time")
        assert "Milk Temperature" not in result.breakdown
        assert "Foam Amount" not in result.breakdown
        # Averaged over the 0.6 of weight that applied, not the full 1.0
        assert result.quality == 100

    def test_milk_type_none_skips_milk_rules(
        self, engine: BrewEngine, latte_ideal: BrewParameters
    ) -> None:
        params = BrewParameters(
            grind_size=latte_ideal.grind_size,
            temperature=latte_ideal.temperature,
            brew_time=latte_ideal.brew_time,
            milk_type=MilkType.NONE,
            milk_temp=66,
            foam_amount=20,
        )
        result = engine.evaluate("latte", params)
        assert "latte_milk_temp" not in result.applied_rules
        assert "latte_foam" not in result.applied_rules

    def test_milk_given_but_measurements_missing_score_zero(
        self, engine: BrewEngine, espresso_ideal: BrewParameters
    ) -> None:
        params = BrewParameters(
            grind_size=espresso_ideal.grind_size,
            temperature=espresso_ideal.temperature,
            brew_time=espresso_ideal.brew_time,
            milk_type=MilkType.WHOLE,
        )
        result = engine.evaluate("latte", params)
        assert result.breakdown["Milk Temperature"] == 0
        assert result.breakdown["Foam Amount"] == 0
        # 0.6 of the weight at 100, 0.4 at 0
        assert result.quality == 60
        assert result.feedback == "Acceptable Latte, but could use improvement."

    def test_no_applicable_rule_gives_zero(self, espresso_ideal: BrewParameters) -> None:
        orphan = Recipe(
            drink_id="orphan",
            name="Orphan",
            category=DrinkCategory.IMMERSION,
            description="rule gated on another drink",
            ideal_grind=GrindSize.MEDIUM,
            ideal_temp=90,
            ideal_brew_time=60,
            tolerances=Tolerances(temp=3, time=10),
            rules=(grind_rule("orphan_grind", 1.0, drink_is("someone_else")),),
        )
        engine = BrewEngine(build_catalog([orphan]))
        result = engine.evaluate("orphan", espresso_ideal)
        assert result.quality == 0
        assert result.breakdown == {}
        assert result.applied_rules == ()
        assert result.feedback == "Poor Orphan. Way off the mark."


class TestErrors:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"temperature": 76},
            {"temperature": 101},
            {"brew_time": -1},
            {"milk_temp": 48},
            {"milk_temp": 83},
            {"foam_amount": -1},
            {"foam_amount": 101},
        ],
    )
    def test_out_of_range_raises(
        self,
        engine: BrewEngine,
        make_espresso: Callable[..., BrewParameters],
        overrides: dict,
    ) -> None:
        with pytest.raises(ParameterRangeError):
            engine.evaluate("espresso", make_espresso(**overrides))

    def test_unknown_drink(self, engine: BrewEngine, espresso_ideal: BrewParameters) -> None:
        with pytest.raises(UnknownDrinkError, match="frappuccino"):
            engine.evaluate("frappuccino", espresso_ideal)

    def test_parameters_checked_before_lookup(
        self, engine: BrewEngine, make_espresso: Callable[..., BrewParameters]
    ) -> None:
        with pytest.raises(ParameterRangeError):
            engine.evaluate("frappuccino", make_espresso(temperature=20))


class TestTrace:
    def test_trace_lists_every_rule(
        self, engine: BrewEngine, espresso_ideal: BrewParameters
    ) -> None:
        result, trace = engine.evaluate_with_trace("latte", espresso_ideal)
        assert [o.rule_id for o in trace.rule_outcomes] == [
            "latte_grind",
            "latte_espresso_temp",
            "latte_espresso_time",
            "latte_milk_temp",
            "latte_foam",
        ]
        assert tuple(o.rule_id for o in trace.applied) == result.applied_rules
        assert [o.rule_id for o in trace.skipped] == ["latte_milk_temp", "latte_foam"]

    def test_skipped_rule_explains_failed_condition(
        self, engine: BrewEngine, espresso_ideal: BrewParameters
    ) -> None:
        _, trace = engine.evaluate_with_trace("latte", espresso_ideal)
        milk = trace.rule_outcomes[3]
        assert milk.status == RuleStatus.SKIPPED
        assert milk.score is None
        assert milk.explanation == "Condition not met: milk_type not_equals none"

    def test_weights_recorded(self, engine: BrewEngine, espresso_ideal: BrewParameters) -> None:
        _, trace = engine.evaluate_with_trace("latte", espresso_ideal)
        assert trace.total_weight == pytest.approx(0.6)
        assert trace.weighted_score == pytest.approx(60.0)

    def test_rule_feedback(self, engine: BrewEngine, espresso_way_off: BrewParameters) -> None:
        _, trace = engine.evaluate_with_trace("espresso", espresso_way_off)
        assert trace.rule_feedback == {"Grind Size": "Grind needs adjustment"}

    def test_trace_agrees_with_evaluate(
        self, engine: BrewEngine, make_espresso: Callable[..., BrewParameters]
    ) -> None:
        params = make_espresso(temperature=95, brew_time=28)
        result, _ = engine.evaluate_with_trace("espresso", params)
        assert result == engine.evaluate("espresso", params)


class TestParameterHelpers:
    def test_default_parameters_for_milk_drink(self, engine: BrewEngine) -> None:
        params = engine.default_parameters("latte")
        assert params.grind_size == GrindSize.MEDIUM
        assert params.temperature == 91
        assert params.brew_time == 25
        assert (params.milk_type, params.milk_temp, params.foam_amount) == (MilkType.WHOLE, 66, 30)
        assert params.bloom_time is None

    def test_default_parameters_for_pourover(self, engine: BrewEngine) -> None:
        params = engine.default_parameters("pourover")
        assert params.brew_time == 90
        assert params.bloom_time == 30
        assert params.milk_type is None

    def test_default_parameters_are_valid(self, engine: BrewEngine) -> None:
        for drink_id in engine.drink_ids:
            engine.evaluate(drink_id, engine.default_parameters(drink_id))

    def test_required_parameters(self, engine: BrewEngine) -> None:
        base = (ParameterField.GRIND_SIZE, ParameterField.TEMPERATURE, ParameterField.BREW_TIME)
        assert engine.required_parameters("espresso") == base
        assert engine.required_parameters("pourover") == (*base, ParameterField.BLOOM_TIME)
        assert engine.required_parameters("matcha") == (
            *base,
            ParameterField.MILK_TYPE,
            ParameterField.MILK_TEMP,
            ParameterField.FOAM_AMOUNT,
        )


class TestModuleLevel:
    def test_default_engine_is_shared(self) -> None:
        assert default_engine() is default_engine()

    def test_evaluate_uses_builtin_catalog(self, espresso_ideal: BrewParameters) -> None:
        assert evaluate("espresso", espresso_ideal).quality == 100

    def test_custom_catalog(self, espresso_ideal: BrewParameters) -> None:
        engine = BrewEngine(build_catalog([ESPRESSO]))
        assert engine.drink_ids == ("espresso",)
        with pytest.raises(UnknownDrinkError):
            engine.evaluate("latte", espresso_ideal)

    @pytest.mark.parametrize(
        "quality, prefix",
        [
            (95, "Perfect"),
            (94, "Well-crafted"),
            (85, "Well-crafted"),
            (84, "Good"),
            (75, "Good"),
            (74, "Acceptable"),
            (60, "Acceptable"),
            (59, "Below average"),
            (40, "Below average"),
            (39, "Poor"),
            (0, "Poor"),
        ],
    )
    def test_generate_feedback_bands(self, quality: int, prefix: str) -> None:
        assert generate_feedback(quality, "Latte").startswith(f"{prefix} Latte")
