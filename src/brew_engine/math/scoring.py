"""Scoring functions: measured attribute + target -> 0-100 score.

Two strategies:
    - Continuous tolerance-band scoring for temperatures, times and foam.
    - Ordinal step scoring for grind size, which is a discrete setting.
"""

from __future__ import annotations

import math

from brew_engine.models.enums import (
    GRIND_DISTANCE_SCORES,
    GRIND_WAY_OFF_SCORE,
    MAX_PENALTY,
    PENALTY_PER_UNIT,
    PERFECT_SCORE,
    TOLERANCE_BONUS,
    TOLERANCE_FLOOR_SCORE,
    GrindSize,
)


def tolerance_score(actual: float, ideal: float, tolerance: float) -> float:
    """Score a continuous attribute by its distance from the ideal.

    - exact match: 100, whatever the tolerance
    - inside the band: linear from 100 down to 75 at the band edge
    - outside the band: 75 minus 15 per unit of excess, floored at 0

    Args:
        actual: Measured value.
        ideal: Recipe target.
        tolerance: Band half-width, same unit as ``actual``.

    Returns:
        Score in [0, 100].
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    diff = abs(actual - ideal)
    if diff == 0:
        return float(PERFECT_SCORE)

    if diff <= tolerance:
        ratio = (tolerance - diff) / tolerance
        return TOLERANCE_FLOOR_SCORE + TOLERANCE_BONUS * ratio

    excess = diff - tolerance
    penalty = min(MAX_PENALTY, excess * PENALTY_PER_UNIT)
    return max(0.0, TOLERANCE_FLOOR_SCORE - penalty)


def grind_distance(actual: GrindSize, ideal: GrindSize) -> int:
    """Number of grinder steps between two settings."""
    return abs(int(actual) - int(ideal))


def grind_score(actual: GrindSize, ideal: GrindSize) -> int:
    """Score a grind setting: 100 / 70 / 40 for 0 / 1 / 2 steps off, else 10."""
    return GRIND_DISTANCE_SCORES.get(grind_distance(actual, ideal), GRIND_WAY_OFF_SCORE)


def round_score(value: float) -> int:
    """Round half up, so 72.5 becomes 73 rather than Python's banker's 72."""
    return int(math.floor(value + 0.5))
