"""
Domain package for Recipe Console.

This package contains the core business logic and entities,
independent of the terminal they are shown on.
"""

from .entities import (
    DEFAULT_CALORIE_THRESHOLD,
    Ingredient,
    Recipe,
    Step,
    format_number,
)
from .io_abc import OutputStyle, TextIO
from .repo_abc import RecipeRepository

__all__ = [
    "DEFAULT_CALORIE_THRESHOLD",
    "Ingredient",
    "Recipe",
    "Step",
    "format_number",
    "OutputStyle",
    "TextIO",
    "RecipeRepository",
]
