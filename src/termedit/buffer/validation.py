"""Clamping helpers shared by the buffer and the view."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .state import Location

if TYPE_CHECKING:
    from .buffer import Buffer


def saturating_sub(value: int, amount: int) -> int:
    return max(value - amount, 0)


def snap_line_index(buffer: "Buffer", line_index: int) -> int:
    return min(max(line_index, 0), saturating_sub(buffer.height(), 1))


def snap_grapheme_index(buffer: "Buffer", location: Location) -> int:
    line = buffer.get_line(location.line_index)
    if line is None:
        return 0
    return min(max(location.grapheme_index, 0), line.grapheme_count())


def snap_location(buffer: "Buffer", location: Location) -> Location:
    """Return ``location`` clamped into the buffer's valid range."""

    snapped = Location(snap_line_index(buffer, location.line_index), 0)
    snapped.grapheme_index = snap_grapheme_index(
        buffer, Location(snapped.line_index, location.grapheme_index)
    )
    return snapped
