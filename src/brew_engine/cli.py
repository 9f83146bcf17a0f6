"""Developer CLI: inspect recipes and score brews from the terminal.

Usage:
    python -m brew_engine.cli recipes
    python -m brew_engine.cli score latte --grind fine --temperature 93 --brew-time 25 \
        --milk-type whole --milk-temp 66 --foam 20
    python -m brew_engine.cli curve --ideal 93 --tolerance 3
    python -m brew_engine.cli sweep espresso --field temperature --start 85 --stop 100 --step 1
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np
import pandas as pd

from brew_engine.batch import evaluate_batch, parameter_grid
from brew_engine.config import CURVE_POINTS, LOG_FORMAT, LOG_LEVEL
from brew_engine.engine import BrewEngine
from brew_engine.exceptions import ParameterRangeError, UnknownDrinkError
from brew_engine.math.sweep import tolerance_curve
from brew_engine.models.brew_parameters import BrewParameters
from brew_engine.models.enums import GrindSize, MilkType

logger = logging.getLogger(__name__)

_SWEEP_FIELDS = ("temperature", "brew_time", "bloom_time", "milk_temp", "foam_amount")


def _cmd_recipes(engine: BrewEngine, args: argparse.Namespace) -> int:
    rows = []
    for recipe in engine.catalog:
        rows.append(
            {
                "drink": recipe.drink_id,
                "name": recipe.name,
                "category": recipe.category.label,
                "grind": recipe.ideal_grind.label,
                "temp_c": recipe.ideal_temp,
                "time_s": recipe.ideal_brew_time,
                "rules": len(recipe.rules),
            }
        )
    print(pd.DataFrame(rows).to_string(index=False))
    return 0


def _cmd_score(engine: BrewEngine, args: argparse.Namespace) -> int:
    params = BrewParameters(
        grind_size=GrindSize.from_label(args.grind),
        temperature=args.temperature,
        brew_time=args.brew_time,
        bloom_time=args.bloom_time,
        milk_type=MilkType.from_label(args.milk_type) if args.milk_type else None,
        milk_temp=args.milk_temp,
        foam_amount=args.foam,
    )
    result, trace = engine.evaluate_with_trace(args.drink, params)
    payload = {
        "drink": args.drink,
        "quality": result.quality,
        "feedback": result.feedback,
        "breakdown": dict(result.breakdown),
        "applied_rules": list(result.applied_rules),
        "rule_feedback": trace.rule_feedback,
    }
    print(json.dumps(payload, indent=2))
    return 0


def _cmd_curve(engine: BrewEngine, args: argparse.Namespace) -> int:
    curve = tolerance_curve(args.ideal, args.tolerance, args.half_width, args.points)
    print(curve.round(2).to_string(index=False))
    return 0


def _cmd_sweep(engine: BrewEngine, args: argparse.Namespace) -> int:
    if args.step <= 0:
        raise ValueError(f"--step must be positive, got {args.step:g}")
    base = engine.ideal_parameters(args.drink)
    values = np.arange(args.start, args.stop + args.step / 2, args.step)
    grid = parameter_grid(base, **{args.field: values})
    table = evaluate_batch(engine, args.drink, grid).drop(columns=["feedback"])
    for column in ("grind_size", "milk_type"):
        table[column] = table[column].map(lambda value: getattr(value, "label", value))
    print(table.to_string(index=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Brew quality rule engine")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("recipes", help="List the recipe catalog").set_defaults(handler=_cmd_recipes)

    score = sub.add_parser("score", help="Score one brew")
    score.add_argument("drink")
    score.add_argument("--grind", required=True, help="e.g. fine, medium-fine, coarse")
    score.add_argument("--temperature", type=float, required=True)
    score.add_argument("--brew-time", type=float, required=True)
    score.add_argument("--bloom-time", type=float)
    score.add_argument("--milk-type", help="none, whole, skim, oat or almond")
    score.add_argument("--milk-temp", type=float)
    score.add_argument("--foam", type=float)
    score.set_defaults(handler=_cmd_score)

    curve = sub.add_parser("curve", help="Print the tolerance scoring curve")
    curve.add_argument("--ideal", type=float, required=True)
    curve.add_argument("--tolerance", type=float, required=True)
    curve.add_argument("--half-width", type=float)
    curve.add_argument("--points", type=int, default=CURVE_POINTS)
    curve.set_defaults(handler=_cmd_curve)

    sweep = sub.add_parser("sweep", help="Vary one field from the ideal brew")
    sweep.add_argument("drink")
    sweep.add_argument("--field", choices=_SWEEP_FIELDS, required=True)
    sweep.add_argument("--start", type=float, required=True)
    sweep.add_argument("--stop", type=float, required=True)
    sweep.add_argument("--step", type=float, default=1.0)
    sweep.set_defaults(handler=_cmd_sweep)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    args = build_parser().parse_args(argv)

    engine = BrewEngine()
    try:
        return args.handler(engine, args)
    except (ParameterRangeError, UnknownDrinkError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
