"""
In-memory recipe catalog.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from domain.entities import Recipe
from domain.repo_abc import RecipeRepository

logger = logging.getLogger(__name__)


class RecipeCatalog(RecipeRepository):
    """Ordered, append-only store of the recipes entered in a session."""

    def __init__(self) -> None:
        self._recipes: List[Recipe] = []

    def add(self, recipe: Recipe) -> None:
        """Append a recipe. Duplicate names are allowed."""
        self._recipes.append(recipe)
        logger.info(
            f"Added recipe '{recipe.name}' "
            f"({len(self._recipes)} in catalog)"
        )

    def find_by_name(self, name: str) -> Optional[Recipe]:
        """Get the first recipe whose name matches, ignoring case.

        Args:
            name: Recipe name to look up

        Returns:
            Optional[Recipe]: The first match in insertion order, None if
            nothing matches
        """
        wanted = name.lower()
        for recipe in self._recipes:
            if recipe.name.lower() == wanted:
                logger.debug(f"Recipe lookup hit: {name!r}")
                return recipe
        logger.debug(f"Recipe lookup miss: {name!r}")
        return None

    def get_all(self) -> Tuple[Recipe, ...]:
        """Get all recipes in insertion order."""
        return tuple(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self.get_all())

    def __len__(self) -> int:
        return len(self._recipes)
