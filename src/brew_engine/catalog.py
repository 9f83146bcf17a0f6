"""Recipe catalog with auto-discovery of the recipe modules."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from brew_engine.exceptions import CatalogValidationError, UnknownDrinkError
from brew_engine.models.recipe import Recipe
from brew_engine.validation import validate_recipe

logger = logging.getLogger(__name__)


class RecipeCatalog:
    """Holds every validated Recipe, keyed by drink identifier.

    Recipes are validated as they are registered, so a catalog that exists
    only ever contains well-formed recipes. New drinks are added by putting
    a ``RECIPES`` tuple in a module under the recipes/ package; no manual
    registration needed.
    """

    def __init__(self) -> None:
        self._recipes: dict[str, Recipe] = {}

    def discover_recipes(self) -> None:
        """Import every module under the recipes package and register its RECIPES."""
        import brew_engine.recipes as recipes_pkg

        for _finder, module_name, _is_pkg in pkgutil.walk_packages(
            recipes_pkg.__path__, prefix=recipes_pkg.__name__ + "."
        ):
            module = importlib.import_module(module_name)
            for recipe in getattr(module, "RECIPES", ()):
                self.register(recipe)

    def register(self, recipe: Recipe) -> None:
        """Validate and register a recipe.

        Raises:
            CatalogValidationError: if the recipe is malformed or its drink
                id is already taken.
        """
        if recipe.drink_id in self._recipes:
            message = f'Duplicate drink id "{recipe.drink_id}" in catalog'
            logger.error(message)
            raise CatalogValidationError(message, recipe_name=recipe.name)
        validate_recipe(recipe)
        self._recipes[recipe.drink_id] = recipe
        logger.debug("Registered recipe %s (%d rules)", recipe.drink_id, len(recipe.rules))

    def resolve(self, drink_id: str) -> Recipe:
        """Retrieve a recipe by drink id.

        Raises:
            UnknownDrinkError: if the catalog has no such drink.
        """
        recipe = self._recipes.get(drink_id)
        if recipe is None:
            raise UnknownDrinkError(drink_id, known=self.drink_ids)
        return recipe

    @property
    def drink_ids(self) -> tuple[str, ...]:
        """Known drink ids in registration order."""
        return tuple(self._recipes)

    @property
    def recipes(self) -> Mapping[str, Recipe]:
        """Read-only view of the catalog."""
        return MappingProxyType(self._recipes)

    def __contains__(self, drink_id: object) -> bool:
        return drink_id in self._recipes

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes.values())

    def __len__(self) -> int:
        return len(self._recipes)


def build_catalog(recipes: Iterable[Recipe] | None = None) -> RecipeCatalog:
    """Build and validate a catalog.

    Args:
        recipes: Recipes to register. None discovers the built-in recipes.

    Returns:
        A fully validated RecipeCatalog.

    Raises:
        CatalogValidationError: on the first malformed recipe. Treat this as
            fatal; it is a data-authoring bug, not a runtime condition.
    """
    catalog = RecipeCatalog()
    if recipes is None:
        catalog.discover_recipes()
    else:
        for recipe in recipes:
            catalog.register(recipe)
    logger.info("Recipe catalog built with %d drinks", len(catalog))
    return catalog
