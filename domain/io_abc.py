"""
Abstract text boundary for the Recipe Console domain.

Everything the application prints or reads goes through this interface so
the terminal can be swapped for a test harness or another front end.
"""

from abc import ABC, abstractmethod
from enum import Enum


class OutputStyle(Enum):
    """Presentation hint attached to an output line."""

    DEFAULT = "default"
    WARNING = "warning"
    INFO = "info"


class TextIO(ABC):
    """Abstract line-oriented input/output."""

    @abstractmethod
    def read_line(self) -> str:
        """Read one line of user input without the trailing newline."""
        pass

    @abstractmethod
    def write_line(
        self, text: str = "", style: OutputStyle = OutputStyle.DEFAULT
    ) -> None:
        """Write one line of output with an optional style hint."""
        pass
