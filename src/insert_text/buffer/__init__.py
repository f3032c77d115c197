"""Line buffer model, loader, and address validation."""

from .document import LineBuffer, decode, load, split_lines
from .validation import LineAddress, ensure_clear_bounds, to_index

__all__ = [
    "LineAddress",
    "LineBuffer",
    "decode",
    "ensure_clear_bounds",
    "load",
    "split_lines",
    "to_index",
]
