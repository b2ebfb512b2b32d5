"""Document model: grapheme lines, the buffer and cursor locations."""

from .buffer import Buffer, split_lines
from .line import GraphemeWidth, Line, TextFragment
from .state import Location
from .validation import snap_location

__all__ = [
    "Buffer",
    "GraphemeWidth",
    "Line",
    "Location",
    "TextFragment",
    "snap_location",
    "split_lines",
]
