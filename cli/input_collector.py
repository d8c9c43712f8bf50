"""
Interactive recipe entry.

Prompts through the text boundary and re-prompts until each value parses,
then assembles recipes and appends them to the repository.
"""

import logging
import math
import re
from typing import Callable, Optional, TypeVar

from domain.entities import Recipe
from domain.io_abc import TextIO
from domain.repo_abc import RecipeRepository

from . import messages

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
REAL_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)


def parse_positive_int(text: str) -> Optional[int]:
    """Parse a strictly positive integer, None if invalid."""
    text = text.strip()
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


def parse_positive_float(text: str) -> Optional[float]:
    """Parse a strictly positive finite real number, None if invalid."""
    text = text.strip()
    if not REAL_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def log_calories_exceeded(recipe_name: str, total_calories: float) -> None:
    """Observer attached to every entered recipe."""
    logger.info(
        f"Recipe '{recipe_name}' exceeds the calorie threshold "
        f"with {total_calories} calories"
    )


class InputCollector:
    """Builds recipes from validated user input."""

    def __init__(self, io: TextIO):
        self.io = io

    def prompt(self, prompt: str) -> str:
        """Write a prompt and return the raw answer."""
        self.io.write_line(prompt)
        return self.io.read_line()

    def prompt_until(
        self,
        prompt: str,
        parse: Callable[[str], Optional[T]],
        error_message: str,
    ) -> T:
        """Prompt once, then read until ``parse`` accepts a line.

        There is no retry limit; every rejected line is answered with
        ``error_message``.
        """
        self.io.write_line(prompt)
        while True:
            raw = self.io.read_line()
            value = parse(raw)
            if value is not None:
                return value
            logger.debug(f"Rejected input {raw!r} for prompt {prompt!r}")
            self.io.write_line(error_message)

    def collect_ingredient(self, recipe: Recipe, number: int) -> None:
        """Prompt for one ingredient and add it to the recipe."""
        self.io.write_line()
        self.io.write_line(messages.INGREDIENT_HEADER.format(number=number))
        name = self.prompt(messages.INGREDIENT_NAME)
        quantity = self.prompt_until(
            messages.INGREDIENT_QUANTITY,
            parse_positive_float,
            messages.INVALID_QUANTITY,
        )
        unit = self.prompt(messages.INGREDIENT_UNIT)
        calories = self.prompt_until(
            messages.INGREDIENT_CALORIES,
            parse_positive_float,
            messages.INVALID_CALORIES,
        )
        food_group = self.prompt(messages.INGREDIENT_FOOD_GROUP)
        recipe.add_ingredient(name, quantity, unit, calories, food_group)

    def collect_step(self, recipe: Recipe, number: int) -> None:
        """Prompt for one step and add it to the recipe."""
        self.io.write_line()
        self.io.write_line(messages.STEP_HEADER.format(number=number))
        recipe.add_step(self.prompt(messages.STEP_DESCRIPTION))

    def collect_recipe(self) -> Recipe:
        """Prompt for a complete recipe: name, ingredients, then steps."""
        self.io.write_line()
        recipe = Recipe(name=self.prompt(messages.ENTER_RECIPE_NAME))

        ingredient_count = self.prompt_until(
            messages.ENTER_INGREDIENT_COUNT,
            parse_positive_int,
            messages.INVALID_NUMBER,
        )
        for number in range(1, ingredient_count + 1):
            self.collect_ingredient(recipe, number)

        self.io.write_line()
        step_count = self.prompt_until(
            messages.ENTER_STEP_COUNT,
            parse_positive_int,
            messages.INVALID_NUMBER,
        )
        for number in range(1, step_count + 1):
            self.collect_step(recipe, number)

        return recipe

    def wants_another(self) -> bool:
        self.io.write_line()
        answer = self.prompt(messages.ADD_ANOTHER)
        return answer.strip().lower() == "yes"

    def collect_recipes(self, repository: RecipeRepository) -> int:
        """Run the entry phase until the user declines another recipe.

        Args:
            repository: Store receiving each completed recipe

        Returns:
            int: Number of recipes entered
        """
        count = 0
        while True:
            recipe = self.collect_recipe()
            recipe.subscribe(log_calories_exceeded)
            repository.add(recipe)
            count += 1

            self.io.write_line()
            self.io.write_line(messages.RECIPE_ADDED)

            if not self.wants_another():
                return count
