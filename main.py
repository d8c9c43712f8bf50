"""
Recipe Console application.

This is the main entry point: recipe entry followed by the browsing menu.
"""

import logging
import sys
from typing import Optional

from adapters.console import TerminalIO
from adapters.memory import RecipeCatalog
from cli import InputCollector, MenuController, messages
from config import Settings, settings
from domain.io_abc import OutputStyle, TextIO

logger = logging.getLogger(__name__)


def configure_logging(app_settings: Settings) -> None:
    """Send log records to stderr so they stay out of the dialogue."""
    level = "DEBUG" if app_settings.debug else app_settings.log_level.upper()
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(io: TextIO, app_settings: Optional[Settings] = None) -> None:
    """Run one interactive session against the given text boundary."""
    app_settings = app_settings or settings
    catalog = RecipeCatalog()

    io.write_line(messages.WELCOME, OutputStyle.INFO)

    entered = InputCollector(io).collect_recipes(catalog)
    logger.info(f"Entry finished with {entered} recipe(s)")

    MenuController(
        io, catalog, calorie_threshold=app_settings.calorie_threshold
    ).run()


def main() -> None:
    """Console script entry point."""
    configure_logging(settings)
    io = TerminalIO(use_color=settings.use_color)

    try:
        run(io, settings)
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, shutting down")
        io.write_line()
        io.write_line(messages.FAREWELL, OutputStyle.INFO)

    sys.exit(0)


if __name__ == "__main__":
    main()
