"""Sampling helpers for inspecting the tolerance scoring curve."""

from __future__ import annotations

import numpy as np
import pandas as pd

from brew_engine.math.scoring import tolerance_score


def tolerance_curve(
    ideal: float,
    tolerance: float,
    half_width: float | None = None,
    points: int = 101,
) -> pd.DataFrame:
    """Sample tolerance_score() symmetrically around an ideal value.

    Args:
        ideal: Recipe target.
        tolerance: Band half-width.
        half_width: Distance either side of the ideal to sample. Defaults to
            the point where the score first reaches zero (tolerance + 5 units
            of excess) so the whole curve is visible.
        points: Number of samples; odd counts include the ideal itself.

    Returns:
        DataFrame with columns ``offset``, ``actual``, ``score``.
    """
    if points < 2:
        raise ValueError(f"points must be at least 2, got {points}")
    if half_width is None:
        half_width = tolerance + 5.0

    offsets = np.linspace(-half_width, half_width, points)
    actuals = ideal + offsets
    scores = np.fromiter(
        (tolerance_score(float(a), ideal, tolerance) for a in actuals),
        dtype=np.float64,
        count=points,
    )
    return pd.DataFrame({"offset": offsets, "actual": actuals, "score": scores})


def is_symmetric(curve: pd.DataFrame, atol: float = 1e-9) -> bool:
    """True when the score at -x equals the score at +x for every sample."""
    scores = curve["score"].to_numpy()
    return bool(np.allclose(scores, scores[::-1], atol=atol))


def is_non_increasing_with_distance(curve: pd.DataFrame) -> bool:
    """True when the score never rises as |offset| grows."""
    ordered = curve.assign(distance=curve["offset"].abs()).sort_values("distance", kind="stable")
    return bool((ordered["score"].diff().dropna() <= 1e-9).all())
