"""Batch evaluation: many parameter sets against one recipe, as a DataFrame.

Each row is an independent evaluate() call; the engine shares no mutable
state between calls, so the rows can be computed in any order.
"""

from __future__ import annotations

import dataclasses
import itertools
from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from brew_engine.engine import BrewEngine
from brew_engine.models.brew_parameters import BrewParameters

_PARAMETER_COLUMNS = tuple(f.name for f in dataclasses.fields(BrewParameters))


def _plain(value: Any) -> Any:
    # numpy scalars would leak into frozen dataclasses and JSON output
    if isinstance(value, np.generic):
        return value.item()
    return value


def parameter_grid(base: BrewParameters, **axes: Sequence[Any]) -> list[BrewParameters]:
    """Cartesian product of per-field values applied over a base parameter set.

    Example:
        parameter_grid(ideal, temperature=np.arange(88, 99), grind_size=list(GrindSize))

    Raises:
        ValueError: if an axis is not a BrewParameters field.
    """
    unknown = sorted(set(axes) - set(_PARAMETER_COLUMNS))
    if unknown:
        raise ValueError(f"Unknown parameter field(s): {', '.join(unknown)}")
    if not axes:
        return [base]

    names = list(axes)
    grid: list[BrewParameters] = []
    for combo in itertools.product(*(list(axes[name]) for name in names)):
        changes = {name: _plain(value) for name, value in zip(names, combo)}
        grid.append(dataclasses.replace(base, **changes))
    return grid


def evaluate_batch(
    engine: BrewEngine,
    drink_id: str,
    parameter_sets: Iterable[BrewParameters],
) -> pd.DataFrame:
    """Evaluate every parameter set and tabulate the results.

    Columns: the BrewParameters fields, ``quality``, ``feedback``, then one
    column per breakdown entry in rule order (NaN where the rule did not
    apply).

    Raises:
        ParameterRangeError: on the first out-of-range parameter set.
    """
    recipe = engine.catalog.resolve(drink_id)
    rule_names = [rule.name for rule in recipe.rules]

    rows: list[dict[str, Any]] = []
    for params in parameter_sets:
        result = engine.evaluate(drink_id, params)
        row: dict[str, Any] = {name: getattr(params, name) for name in _PARAMETER_COLUMNS}
        row["quality"] = result.quality
        row["feedback"] = result.feedback
        for name in rule_names:
            row[name] = result.breakdown.get(name, np.nan)
        rows.append(row)

    columns = [*_PARAMETER_COLUMNS, "quality", "feedback", *rule_names]
    return pd.DataFrame(rows, columns=columns)
