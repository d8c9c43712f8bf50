"""
Console workflows for Recipe Console.

This package drives recipe entry and the browsing menu through the
abstract text boundary.
"""

from .input_collector import InputCollector
from .menu import MenuController, MenuOption

__all__ = ["InputCollector", "MenuController", "MenuOption"]
