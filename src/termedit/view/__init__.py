"""Viewport/cursor controller, editor commands and the terminal boundary."""

from .commands import (
    Backspace,
    CommandResult,
    Delete,
    Direction,
    EditorCommand,
    Insert,
    InsertNewline,
    Move,
    Quit,
    Resize,
)
from .terminal import Position, RowCanvas, Size, StyledRow, TerminalOutput
from .view import TextSource, View

__all__ = [
    "Backspace",
    "CommandResult",
    "Delete",
    "Direction",
    "EditorCommand",
    "Insert",
    "InsertNewline",
    "Move",
    "Position",
    "Quit",
    "Resize",
    "RowCanvas",
    "Size",
    "StyledRow",
    "TerminalOutput",
    "TextSource",
    "View",
]
