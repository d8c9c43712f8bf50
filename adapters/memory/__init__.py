"""
In-memory adapters package.

This package contains implementations of repository interfaces
that live only for the lifetime of the process.
"""

from .catalog import RecipeCatalog

__all__ = ["RecipeCatalog"]
