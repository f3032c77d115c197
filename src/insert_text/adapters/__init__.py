"""Host adapters for the edit pipeline."""

from . import filesystem

__all__ = ["filesystem"]
