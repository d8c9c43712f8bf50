"""
Console adapters package.

This package implements the text boundary on top of the process
standard streams.
"""

from .terminal import TerminalIO

__all__ = ["TerminalIO"]
