"""
Terminal implementation of the text boundary.
"""

import sys
from typing import Callable, Dict, Optional, TextIO as Stream

from domain.io_abc import OutputStyle, TextIO

ANSI_RESET = "\033[0m"

STYLE_CODES: Dict[OutputStyle, str] = {
    OutputStyle.DEFAULT: "",
    OutputStyle.WARNING: "\033[31m",  # red
    OutputStyle.INFO: "\033[34m",  # blue
}


class TerminalIO(TextIO):
    """Reads from ``input()`` and writes to a stream, colouring styled
    lines with ANSI escapes when enabled."""

    def __init__(
        self,
        use_color: bool = True,
        stream: Optional[Stream] = None,
        reader: Callable[[], str] = input,
    ):
        self.use_color = use_color
        self.stream = stream if stream is not None else sys.stdout
        self._reader = reader

    def read_line(self) -> str:
        """Read one line; EOFError propagates to the caller."""
        return self._reader()

    def write_line(
        self, text: str = "", style: OutputStyle = OutputStyle.DEFAULT
    ) -> None:
        code = STYLE_CODES[style]
        if self.use_color and code:
            text = f"{code}{text}{ANSI_RESET}"
        self.stream.write(text + "\n")
        self.stream.flush()
