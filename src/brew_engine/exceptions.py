"""Custom exception hierarchy for the brew rule engine."""

from __future__ import annotations


class BrewEngineError(Exception):
    """Base exception for all brew_engine errors."""


class CatalogValidationError(BrewEngineError):
    """A recipe in the catalog is malformed (data-authoring bug).

    Raised while the catalog is being built; the process should not
    continue with a catalog that failed validation.
    """

    def __init__(
        self,
        message: str,
        recipe_name: str | None = None,
        weights: tuple[tuple[str, float], ...] = (),
    ) -> None:
        super().__init__(message)
        self.recipe_name = recipe_name
        self.weights = weights


class ParameterRangeError(BrewEngineError, ValueError):
    """A caller-supplied brew parameter lies outside its physical range."""

    def __init__(
        self,
        field: str,
        value: float,
        minimum: float | None,
        maximum: float | None,
    ) -> None:
        low = "-inf" if minimum is None else f"{minimum:g}"
        high = "inf" if maximum is None else f"{maximum:g}"
        closing = ")" if maximum is None else "]"
        opening = "(" if minimum is None else "["
        super().__init__(f"{field}={value:g} outside valid range {opening}{low}, {high}{closing}")
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class UnknownDrinkError(BrewEngineError, LookupError):
    """The requested drink identifier has no catalog entry."""

    def __init__(self, drink_id: str, known: tuple[str, ...] = ()) -> None:
        message = f"Unknown drink {drink_id!r}"
        if known:
            message += f" (known drinks: {', '.join(known)})"
        super().__init__(message)
        self.drink_id = drink_id
