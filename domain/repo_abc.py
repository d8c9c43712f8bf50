"""
Abstract repository interfaces for the Recipe Console domain.

These interfaces define the contract for recipe storage without specifying
the implementation details.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .entities import Recipe


class RecipeRepository(ABC):
    """Abstract repository for recipe data access."""

    @abstractmethod
    def add(self, recipe: Recipe) -> None:
        """Append a recipe."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Recipe]:
        """Get the first recipe whose name matches, ignoring case."""
        pass

    @abstractmethod
    def get_all(self) -> Tuple[Recipe, ...]:
        """Get all recipes in insertion order."""
        pass
