"""Enumerations and tunable constants for the brew rule engine.

Scoring constants are preserved exactly as the game has always shipped them;
changing any of them changes every stored quality score.
"""

from __future__ import annotations

from enum import IntEnum, auto


class GrindSize(IntEnum):
    """Grinder settings ordered coarsest to finest.

    The integer value is the ordinal position used for categorical
    distance scoring, so members must stay contiguous.
    """

    COARSE = 1
    MEDIUM_COARSE = 2
    MEDIUM = 3
    MEDIUM_FINE = 4
    FINE = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_label(cls, label: str) -> GrindSize:
        """Parse a hyphenated label such as ``"medium-fine"``."""
        try:
            return cls[label.strip().upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(g.label for g in cls)
            raise ValueError(f"Unknown grind size {label!r} (expected one of: {valid})") from None


class DrinkCategory(IntEnum):
    """Brewing method family; decides which optional parameters matter."""

    ESPRESSO_BASED = auto()
    POUR_OVER = auto()
    IMMERSION = auto()

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class MilkType(IntEnum):
    """Milk choices. NONE is an explicit "no milk" order, not a missing value."""

    NONE = auto()
    WHOLE = auto()
    SKIM = auto()
    OAT = auto()
    ALMOND = auto()

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> MilkType:
        try:
            return cls[label.strip().upper()]
        except KeyError:
            valid = ", ".join(m.label for m in cls)
            raise ValueError(f"Unknown milk type {label!r} (expected one of: {valid})") from None


class ComparisonOperator(IntEnum):
    """Operators available to rule conditions."""

    EQUALS = auto()
    NOT_EQUALS = auto()
    LESS_THAN = auto()
    GREATER_THAN = auto()
    RANGE = auto()  # |actual - value| <= tolerance


class ParameterField(IntEnum):
    """Condition subjects read from the caller's BrewParameters."""

    GRIND_SIZE = auto()
    TEMPERATURE = auto()
    BREW_TIME = auto()
    BLOOM_TIME = auto()
    MILK_TYPE = auto()
    MILK_TEMP = auto()
    FOAM_AMOUNT = auto()

    @property
    def attribute(self) -> str:
        """Name of the matching BrewParameters attribute."""
        return self.name.lower()


class ContextField(IntEnum):
    """Condition subjects read from the EvaluationContext."""

    DRINK_ID = auto()
    DRINK_CATEGORY = auto()

    @property
    def attribute(self) -> str:
        return self.name.lower()


# ---------------------------------------------------------------------------
# Tolerance scoring
# ---------------------------------------------------------------------------
PERFECT_SCORE = 100
TOLERANCE_FLOOR_SCORE = 75  # Score at exactly |actual - ideal| == tolerance
TOLERANCE_BONUS = 25  # Linear bonus earned inside the band
PENALTY_PER_UNIT = 15  # Penalty per unit of distance beyond the band
MAX_PENALTY = 75  # Keeps the score floored at 0

# ---------------------------------------------------------------------------
# Grind scoring (categorical, ordinal distance -> score)
# ---------------------------------------------------------------------------
GRIND_DISTANCE_SCORES = {
    0: 100,
    1: 70,
    2: 40,
}
GRIND_WAY_OFF_SCORE = 10  # Three or more steps away

# ---------------------------------------------------------------------------
# Aggregate feedback bands (lower bound of each band)
# ---------------------------------------------------------------------------
EXCELLENT_THRESHOLD = 95
GOOD_THRESHOLD = 85
ACCEPTABLE_THRESHOLD = 75
DECENT_THRESHOLD = 60
POOR_THRESHOLD = 40

# Per-rule feedback generators use these cut-offs
RULE_FEEDBACK_GREAT = 90
RULE_FEEDBACK_OK = 70

# ---------------------------------------------------------------------------
# Global physical ranges (inclusive) for caller-supplied parameters
# ---------------------------------------------------------------------------
TEMP_MIN_C = 77
TEMP_MAX_C = 100
BREW_TIME_MIN_S = 0
BLOOM_TIME_MIN_S = 0
MILK_TEMP_MIN_C = 49
MILK_TEMP_MAX_C = 82
FOAM_MIN_PCT = 0
FOAM_MAX_PCT = 100

# ---------------------------------------------------------------------------
# Catalog construction
# ---------------------------------------------------------------------------
WEIGHT_SUM_TOLERANCE = 0.001

# Used when a recipe leaves the matching tolerance unset
DEFAULT_MILK_TEMP_TOLERANCE = 10
DEFAULT_FOAM_TOLERANCE = 15
DEFAULT_BLOOM_TOLERANCE = 10

# ---------------------------------------------------------------------------
# Starting slider positions offered to the brewing UI
# ---------------------------------------------------------------------------
DEFAULT_GRIND = GrindSize.MEDIUM
DEFAULT_TEMP_C = 91
DEFAULT_ESPRESSO_TIME_S = 25
DEFAULT_BREW_TIME_S = 90
DEFAULT_MILK_TYPE = MilkType.WHOLE
DEFAULT_MILK_TEMP_C = 66
DEFAULT_FOAM_PCT = 30
DEFAULT_BLOOM_TIME_S = 30
