"""
Domain entities for the Recipe Console application.

These classes represent the core business concepts and contain only business
logic. They write through the abstract text boundary and never touch the
terminal directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from .io_abc import OutputStyle, TextIO

DEFAULT_CALORIE_THRESHOLD = 300.0

CaloriesExceededObserver = Callable[[str, float], None]


def format_number(value: float) -> str:
    """Render a number without a trailing ".0" for integral values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Ingredient:
    """Represents an ingredient with quantity, unit and calories per unit."""

    name: str
    quantity: float
    unit: str
    calories_per_unit: float
    food_group: str

    @property
    def total_calories(self) -> float:
        return self.quantity * self.calories_per_unit

    def __str__(self) -> str:
        return f"{format_number(self.quantity)} {self.unit} of {self.name}"


@dataclass(frozen=True)
class Step:
    """Represents a single preparation step."""

    description: str

    def __str__(self) -> str:
        return self.description


@dataclass
class Recipe:
    """Represents a recipe with ingredients, steps and a calorie total."""

    name: str
    ingredients: List[Ingredient] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)
    _observers: List[CaloriesExceededObserver] = field(
        default_factory=list, repr=False, compare=False
    )

    def add_ingredient(
        self,
        name: str,
        quantity: float,
        unit: str,
        calories_per_unit: float,
        food_group: str,
    ) -> Ingredient:
        """Append a new ingredient. Values are expected to be validated."""
        ingredient = Ingredient(
            name=name,
            quantity=quantity,
            unit=unit,
            calories_per_unit=calories_per_unit,
            food_group=food_group,
        )
        self.ingredients.append(ingredient)
        return ingredient

    def add_step(self, description: str) -> Step:
        """Append a new step."""
        step = Step(description=description)
        self.steps.append(step)
        return step

    def calculate_total_calories(self) -> float:
        """Sum quantity times calories per unit over all ingredients.

        Returns:
            float: Total calories, 0 for a recipe without ingredients
        """
        return sum(
            (ingredient.total_calories for ingredient in self.ingredients),
            0.0,
        )

    def exceeds_threshold(
        self, threshold: float = DEFAULT_CALORIE_THRESHOLD
    ) -> bool:
        """Check if total calories are strictly above the threshold."""
        return self.calculate_total_calories() > threshold

    def subscribe(self, observer: CaloriesExceededObserver) -> None:
        """Register a callback fired when a warned display exceeds the
        threshold."""
        self._observers.append(observer)

    def unsubscribe(self, observer: CaloriesExceededObserver) -> None:
        """Remove a previously registered callback."""
        self._observers.remove(observer)

    def display(
        self,
        output: TextIO,
        show_threshold_warning: bool = False,
        threshold: float = DEFAULT_CALORIE_THRESHOLD,
    ) -> None:
        """Write the recipe to the output boundary.

        Args:
            output: Text boundary receiving the lines
            show_threshold_warning: Emit the calorie warning and notify
                observers when the total exceeds the threshold
            threshold: Calorie threshold for the warning
        """
        total = self.calculate_total_calories()

        output.write_line(f"Recipe: {self.name}")
        output.write_line("Ingredients:")
        for ingredient in self.ingredients:
            output.write_line(str(ingredient))

        output.write_line()
        output.write_line("Steps:")
        for number, step in enumerate(self.steps, start=1):
            output.write_line(f"{number}. {step}")

        output.write_line(f"Total Calories: {format_number(total)}")

        if show_threshold_warning and self.exceeds_threshold(threshold):
            output.write_line(
                f"Warning: Total calories for recipe '{self.name}' exceed "
                f"{format_number(threshold)}. "
                f"Total calories: {format_number(total)}",
                OutputStyle.WARNING,
            )
            self._notify(total)

    def _notify(self, total: float) -> None:
        for observer in list(self._observers):
            observer(self.name, total)

    def __str__(self) -> str:
        return f"Recipe: {self.name}"
