"""
Top-level browsing menu.
"""

import logging
from enum import Enum

from domain.entities import DEFAULT_CALORIE_THRESHOLD
from domain.io_abc import OutputStyle, TextIO
from domain.repo_abc import RecipeRepository

from . import messages

logger = logging.getLogger(__name__)


class MenuOption(Enum):
    """Menu selections as typed by the user."""

    LIST_ALL = "1"
    SHOW_ONE = "2"
    EXIT = "3"


class MenuController:
    """Presents the menu and dispatches selections until Exit."""

    def __init__(
        self,
        io: TextIO,
        repository: RecipeRepository,
        calorie_threshold: float = DEFAULT_CALORIE_THRESHOLD,
    ):
        self.io = io
        self.repository = repository
        self.calorie_threshold = calorie_threshold

    def show_menu(self) -> None:
        self.io.write_line()
        self.io.write_line(messages.MENU_HEADER)
        self.io.write_line(messages.MENU_LIST_ALL)
        self.io.write_line(messages.MENU_SHOW_ONE)
        self.io.write_line(messages.MENU_EXIT)

    def list_all(self) -> None:
        """Display every recipe with the calorie warning enabled."""
        self.io.write_line()
        self.io.write_line(messages.RECIPES_HEADER)
        for recipe in self.repository.get_all():
            recipe.display(
                self.io,
                show_threshold_warning=True,
                threshold=self.calorie_threshold,
            )
            self.io.write_line()

    def show_one(self) -> None:
        """Look up one recipe by name and display it without warnings."""
        self.io.write_line()
        self.io.write_line(messages.ENTER_RECIPE_NAME)
        name = self.io.read_line()
        recipe = self.repository.find_by_name(name)
        if recipe is None:
            self.io.write_line(messages.RECIPE_NOT_FOUND)
            return
        recipe.display(self.io, threshold=self.calorie_threshold)

    def handle(self, selection: str) -> bool:
        """Dispatch one selection.

        Returns:
            bool: False once the user chose Exit, True otherwise
        """
        try:
            option = MenuOption(selection.strip())
        except ValueError:
            logger.debug(f"Invalid menu selection: {selection!r}")
            self.io.write_line(messages.INVALID_OPTION)
            return True

        logger.debug(f"Menu selection: {option.name}")
        if option is MenuOption.LIST_ALL:
            self.list_all()
        elif option is MenuOption.SHOW_ONE:
            self.show_one()
        else:
            self.io.write_line(messages.FAREWELL, OutputStyle.INFO)
            return False
        return True

    def run(self) -> None:
        """Loop over the menu until Exit is selected."""
        while True:
            self.show_menu()
            if not self.handle(self.io.read_line()):
                return
