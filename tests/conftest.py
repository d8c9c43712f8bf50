"""
Shared test fixtures and utilities.
"""

from typing import Iterable, List, Tuple

import pytest

from adapters.memory import RecipeCatalog
from domain.entities import Recipe
from domain.io_abc import OutputStyle, TextIO


class ScriptedIO(TextIO):
    """Text boundary that replays scripted input and records output."""

    def __init__(self, lines: Iterable[str] = ()):
        self.inputs: List[str] = list(lines)
        self.outputs: List[Tuple[str, OutputStyle]] = []

    def feed(self, *lines: str) -> None:
        self.inputs.extend(lines)

    def read_line(self) -> str:
        if not self.inputs:
            raise EOFError("No more scripted input")
        return self.inputs.pop(0)

    def write_line(
        self, text: str = "", style: OutputStyle = OutputStyle.DEFAULT
    ) -> None:
        self.outputs.append((text, style))

    @property
    def lines(self) -> List[str]:
        return [text for text, _ in self.outputs]

    def lines_with_style(self, style: OutputStyle) -> List[str]:
        return [text for text, s in self.outputs if s is style]


def recipe_answers(
    name: str,
    ingredients: Iterable[Tuple[str, str, str, str, str]],
    steps: Iterable[str],
) -> List[str]:
    """Build the input lines for one recipe in the entry workflow."""
    ingredients = list(ingredients)
    steps = list(steps)
    answers = [name, str(len(ingredients))]
    for ingredient in ingredients:
        answers.extend(ingredient)
    answers.append(str(len(steps)))
    answers.extend(steps)
    return answers


@pytest.fixture
def scripted_io():
    """Empty scripted text boundary."""
    return ScriptedIO()


@pytest.fixture
def catalog():
    """Empty in-memory recipe catalog."""
    return RecipeCatalog()


@pytest.fixture
def salad():
    """Recipe totalling 90 calories."""
    recipe = Recipe(name="Salad")
    recipe.add_ingredient("lettuce", 1, "cup", 50, "vegetables")
    recipe.add_ingredient("tomato", 2, "cup", 20, "vegetables")
    recipe.add_step("Wash the vegetables")
    recipe.add_step("Toss in a bowl")
    return recipe


@pytest.fixture
def cake():
    """Recipe totalling 400 calories."""
    recipe = Recipe(name="Cake")
    recipe.add_ingredient("chocolate cake", 1, "slice", 400, "sweets")
    recipe.add_step("Serve")
    return recipe
