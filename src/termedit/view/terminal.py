"""Screen geometry and the terminal-output boundary used by the view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass(frozen=True, slots=True)
class Size:
    width: int = 0
    height: int = 0


@dataclass(frozen=True, slots=True)
class Position:
    """A screen cell, ``row`` first like the rest of the engine."""

    row: int = 0
    col: int = 0

    def saturating_sub(self, other: "Position") -> "Position":
        return Position(
            row=max(self.row - other.row, 0), col=max(self.col - other.col, 0)
        )


class TerminalOutput(Protocol):
    """What the view needs from whatever draws on the screen.

    Implementations raise ``OSError`` when drawing fails.
    """

    def get_size(self) -> Size:
        ...

    def print_row(self, row: int, text: str) -> None:
        """Replace the contents of ``row`` with ``text``."""
        ...

    def clear_line(self, row: int) -> None:
        ...

    def set_color(self, color: str) -> None:
        ...

    def reset_color(self) -> None:
        ...


@dataclass(slots=True)
class StyledRow:
    text: str = ""
    color: Optional[str] = None


@dataclass
class RowCanvas:
    """In-memory terminal; hosts copy ``rows`` into their own widgets."""

    size: Size = field(default_factory=Size)
    rows: List[StyledRow] = field(default_factory=list)
    _color: Optional[str] = None

    def __post_init__(self) -> None:
        self._fit_rows()

    def resize(self, size: Size) -> None:
        self.size = size
        self._fit_rows()

    def _fit_rows(self) -> None:
        height = self.size.height
        del self.rows[height:]
        while len(self.rows) < height:
            self.rows.append(StyledRow())

    def get_size(self) -> Size:
        return self.size

    def print_row(self, row: int, text: str) -> None:
        if not 0 <= row < len(self.rows):
            raise OSError(f"row {row} is outside a {self.size.height}-row canvas")
        self.rows[row] = StyledRow(text=text, color=self._color)

    def clear_line(self, row: int) -> None:
        if 0 <= row < len(self.rows):
            self.rows[row] = StyledRow()

    def set_color(self, color: str) -> None:
        self._color = color

    def reset_color(self) -> None:
        self._color = None

    def text_rows(self) -> List[str]:
        return [row.text for row in self.rows]


__all__ = ["Position", "RowCanvas", "Size", "StyledRow", "TerminalOutput"]
