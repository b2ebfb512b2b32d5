"""Decoded editor commands and the result of dispatching them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .terminal import Size


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass(frozen=True, slots=True)
class Move:
    direction: Direction


@dataclass(frozen=True, slots=True)
class Resize:
    size: Size


@dataclass(frozen=True, slots=True)
class Insert:
    character: str

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError("Insert takes exactly one character")


@dataclass(frozen=True, slots=True)
class InsertNewline:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


EditorCommand = Union[Move, Resize, Insert, InsertNewline, Delete, Backspace, Quit]


@dataclass(slots=True)
class CommandResult:
    """Outcome of ``View.handle_command``.

    ``status`` is ``"ok"`` when something changed, ``"noop"`` when the
    command hit a boundary, and ``"quit"`` for the quit request.
    """

    status: str = "ok"
    message: Optional[str] = None

    @property
    def should_quit(self) -> bool:
        return self.status == "quit"


__all__ = [
    "Backspace",
    "CommandResult",
    "Delete",
    "Direction",
    "EditorCommand",
    "Insert",
    "InsertNewline",
    "Move",
    "Quit",
    "Resize",
]
