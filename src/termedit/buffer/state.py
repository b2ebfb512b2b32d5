"""Logical cursor position inside a buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Location:
    """Cursor position counted in lines and grapheme clusters, not cells."""

    line_index: int = 0
    grapheme_index: int = 0

    def copy(self) -> "Location":
        return Location(self.line_index, self.grapheme_index)

    def as_tuple(self) -> tuple[int, int]:
        return (self.line_index, self.grapheme_index)
