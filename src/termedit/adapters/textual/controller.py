"""Bridges Textual key/resize events to the view and back to widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from termedit.view import (
    Backspace,
    CommandResult,
    Delete,
    Direction,
    EditorCommand,
    Insert,
    InsertNewline,
    Move,
    Position,
    Quit,
    Resize,
    RowCanvas,
    Size,
    StyledRow,
    View,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


_MOVE_KEYS: Dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "pageup": Direction.PAGE_UP,
    "pagedown": Direction.PAGE_DOWN,
    "home": Direction.HOME,
    "end": Direction.END,
}


def key_to_command(key: str, character: Optional[str] = None) -> Optional[EditorCommand]:
    """Translate a Textual key name (plus its character) into a command."""

    normalized = key.lower()
    if normalized in {"ctrl+q", "ctrl+shift+q"}:
        return Quit()
    if normalized in _MOVE_KEYS:
        return Move(_MOVE_KEYS[normalized])
    if normalized == "backspace":
        return Backspace()
    if normalized == "delete":
        return Delete()
    if normalized in {"enter", "return"}:
        return InsertNewline()
    if normalized == "tab":
        return Insert("\t")
    if character and len(character) == 1 and character.isprintable():
        if "ctrl+" in normalized or "alt+" in normalized:
            return None
        return Insert(character)
    return None


@dataclass(slots=True)
class ViewHooks:
    """Callbacks the adapter uses to update the host widgets."""

    update_rows: Callable[[List[StyledRow]], None]
    update_cursor: Callable[[Position], None] = _noop
    update_status: Callable[[str], None] = _noop
    request_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualViewAdapter:
    """Feeds commands to a ``View`` and republishes what it renders."""

    def __init__(
        self, view: View, hooks: ViewHooks, *, canvas: Optional[RowCanvas] = None
    ) -> None:
        self.view = view
        self.hooks = hooks
        self.canvas = canvas or RowCanvas(size=view.size)
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[CommandResult]:
        command = key_to_command(key, character)
        self._log_state("key ->", key=key, character=character, command=command)
        if command is None:
            return None
        return self.dispatch(command)

    def handle_resize(self, width: int, height: int) -> CommandResult:
        return self.dispatch(Resize(Size(width=width, height=height)))

    def dispatch(self, command: EditorCommand) -> CommandResult:
        result = self.view.handle_command(command)
        self._log_state("result <-", status=result.status, message=result.message)
        if result.should_quit:
            self.hooks.request_quit()
            return result
        if result.message:
            self.hooks.update_status(result.message)
        self.refresh()
        return result

    def refresh(self) -> None:
        if self.canvas.size != self.view.size:
            self.canvas.resize(self.view.size)
        if self.view.render(self.canvas):
            self.hooks.update_rows(list(self.canvas.rows))
        self.hooks.update_cursor(self.view.cursor_screen_position())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "location": self.view.location.as_tuple(),
            "scroll": (self.view.scroll_offset.row, self.view.scroll_offset.col),
            "buffer": self.view.buffer.name,
            "buffer_version": self.view.buffer.version,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualViewAdapter", "ViewHooks", "key_to_command"]
