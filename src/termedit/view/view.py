"""Viewport and cursor controller.

``View`` owns the buffer, the logical cursor (a ``Location``), the scroll
offset and the viewport size. Commands mutate that state, scroll the cursor
back into the window, and flag the view dirty; ``render`` then draws the
window through a ``TerminalOutput``.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from wcwidth import wcswidth

from termedit.buffer import Buffer, Line, Location
from termedit.buffer.validation import (
    saturating_sub,
    snap_grapheme_index,
    snap_line_index,
    snap_location,
)
from termedit.config import EditorConfig
from termedit.errors import RenderError, TextLoadError
from termedit.runtime import telemetry

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
from .terminal import Position, Size, TerminalOutput


class TextSource(Protocol):
    """Provides decoded document text for a path.

    Implementations raise ``OSError`` or ``UnicodeDecodeError`` on failure.
    """

    def read_text(self, path: str) -> str:
        ...


class View:
    def __init__(
        self,
        *,
        buffer: Optional[Buffer] = None,
        size: Optional[Size] = None,
        config: Optional[EditorConfig] = None,
        text_source: Optional[TextSource] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.buffer = buffer if buffer is not None else Buffer()
        self.size = size or Size(
            width=self.config.fallback_width, height=self.config.fallback_height
        )
        self.text_source = text_source
        self.location = Location()
        self.scroll_offset = Position()
        self.needs_redraw = True

    # ------------------------------------------------------------------
    # host surface

    def handle_command(self, command: EditorCommand) -> CommandResult:
        name = type(command).__name__
        with telemetry.span(
            "view::command", component="view", metadata={"command": name}
        ):
            result = self._dispatch(command)
        telemetry.record_event(
            "view.command",
            level="debug",
            data={
                "command": name,
                "status": result.status,
                "location": self.location.as_tuple(),
                "scroll": (self.scroll_offset.row, self.scroll_offset.col),
            },
            logger_name="termedit.view",
        )
        return result

    def resize(self, to_size: Size) -> None:
        self.size = to_size
        self.needs_redraw = True
        self.scroll_location_into_view()
        telemetry.record_event(
            "view.resized",
            data={"width": to_size.width, "height": to_size.height},
            logger_name="termedit.view",
        )

    def load(self, path: str) -> None:
        """Replace the buffer with the document at ``path``.

        On failure a ``TextLoadError`` is raised and the current buffer,
        cursor and scroll offset are kept as they were.
        """

        if self.text_source is None:
            raise TextLoadError("No text source configured", path=path)
        try:
            text = self.text_source.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            telemetry.record_event(
                "view.load_failed",
                level="error",
                data={"path": path, "reason": str(exc)},
                logger_name="termedit.view",
            )
            raise TextLoadError(f"Could not load '{path}': {exc}", path=path) from exc
        self.load_text(text, name=path)
        telemetry.record_event(
            "view.loaded",
            data={"path": path, "lines": self.buffer.height()},
            logger_name="termedit.view",
        )

    def load_text(self, text: str, *, name: str = "default") -> None:
        self.buffer = Buffer.from_text(text, name=name)
        self.location = Location()
        self.scroll_offset = Position()
        self.needs_redraw = True
        self.scroll_location_into_view()

    def cursor_screen_position(self) -> Position:
        """Cursor cell relative to the viewport's top-left corner."""

        return self.text_location_to_position().saturating_sub(self.scroll_offset)

    def text_location_to_position(self) -> Position:
        line = self.buffer.get_line(self.location.line_index)
        col = line.width_until(self.location.grapheme_index) if line is not None else 0
        return Position(row=self.location.line_index, col=col)

    # ------------------------------------------------------------------
    # rendering

    def render(self, terminal: TerminalOutput) -> bool:
        """Draw the visible window; return whether a pass actually ran.

        Nothing is drawn when the view is clean or has no cells. The dirty
        flag is cleared only once every row was written, so a failed pass
        is retried on the next call.
        """

        if not self.needs_redraw:
            return False
        width, height = self.size.width, self.size.height
        if width == 0 or height == 0:
            return False

        top = self.scroll_offset.row
        left = self.scroll_offset.col
        vertical_center = height // 3
        with telemetry.span(
            "view::render",
            component="view",
            metadata={"top": top, "left": left, "height": height},
        ):
            for row in range(height):
                line = self.buffer.get_line(row + top)
                if line is not None:
                    text = line.get_visible_graphemes(left, left + width)
                    self._draw(row, lambda: self._print_row(terminal, row, text))
                elif row == vertical_center and self.buffer.is_empty():
                    banner = self.build_welcome_message(width)
                    self._draw(row, lambda: self._print_row(terminal, row, banner))
                else:
                    self._draw(row, lambda: self._print_marker(terminal, row))
            self._draw(None, terminal.reset_color)
        self.needs_redraw = False
        return True

    def build_welcome_message(self, width: int) -> str:
        if width == 0:
            return " "
        marker = self.config.empty_row_marker
        message = self.config.welcome_message
        # Cells, not code points; wcswidth is -1 for unprintable text.
        cells = wcswidth(message)
        if cells < 0:
            cells = len(message)
        if width <= cells:
            return marker
        padding = (width - cells - 1) // 2
        return f"{marker}{' ' * padding}{message}"

    @staticmethod
    def _print_row(terminal: TerminalOutput, row: int, text: str) -> None:
        terminal.clear_line(row)
        terminal.print_row(row, text)

    def _print_marker(self, terminal: TerminalOutput, row: int) -> None:
        terminal.clear_line(row)
        terminal.set_color(self.config.marker_color)
        terminal.print_row(row, self.config.empty_row_marker)
        terminal.reset_color()

    def _draw(self, row: Optional[int], action: Callable[[], None]) -> None:
        try:
            action()
        except OSError as exc:
            telemetry.record_event(
                "view.render_failed",
                level="error",
                data={"row": row, "reason": str(exc)},
                logger_name="termedit.view",
            )
            raise RenderError(f"Failed to render row {row}: {exc}", row=row) from exc

    # ------------------------------------------------------------------
    # command handling

    def _dispatch(self, command: EditorCommand) -> CommandResult:
        if isinstance(command, Move):
            before = self.location.as_tuple()
            self.move_text_location(command.direction)
            status = "ok" if self.location.as_tuple() != before else "noop"
            return CommandResult(status=status)
        if isinstance(command, Resize):
            self.resize(command.size)
            return CommandResult()
        if isinstance(command, Insert):
            if command.character == "\t" and self.config.tab_width:
                for _ in range(self.config.tab_width):
                    self._insert_char(" ")
            else:
                self._insert_char(command.character)
            return CommandResult()
        if isinstance(command, InsertNewline):
            self._insert_newline()
            return CommandResult()
        if isinstance(command, Delete):
            return self._delete()
        if isinstance(command, Backspace):
            return self._backspace()
        if isinstance(command, Quit):
            telemetry.record_event("view.quit", logger_name="termedit.view")
            return CommandResult(status="quit", message="quit")
        raise TypeError(f"Unsupported command {command!r}")

    def _current_line(self) -> Optional[Line]:
        return self.buffer.get_line(self.location.line_index)

    def _current_grapheme_count(self) -> int:
        line = self._current_line()
        return line.grapheme_count() if line is not None else 0

    def _insert_char(self, character: str) -> None:
        old_count = self._current_grapheme_count()
        self.buffer.insert_char(character, self.location)
        # A combining mark joins the previous cluster; the cursor stays put.
        if self._current_grapheme_count() > old_count:
            self.move_right()
        self.scroll_location_into_view()
        self.needs_redraw = True

    def _insert_newline(self) -> None:
        if self.location.line_index == self.buffer.height():
            self.buffer.insert_line(self.location)
        self.buffer.insert_line(self.location)
        self.location = Location(self.location.line_index + 1, 0)
        self.scroll_location_into_view()
        self.needs_redraw = True

    def _delete(self) -> CommandResult:
        if self._at_end_of_buffer():
            return CommandResult(status="noop", message="end_of_buffer")
        self.buffer.delete(self.location)
        # Removing a grapheme can fuse its neighbours into one cluster.
        self.location = snap_location(self.buffer, self.location)
        self.scroll_location_into_view()
        self.needs_redraw = True
        return CommandResult()

    def _backspace(self) -> CommandResult:
        if self.location.as_tuple() == (0, 0):
            return CommandResult(status="noop", message="start_of_buffer")
        self.move_left()
        self.scroll_location_into_view()
        return self._delete()

    def _at_end_of_buffer(self) -> bool:
        if self.buffer.is_empty():
            return True
        return (
            self.location.line_index >= self.buffer.height() - 1
            and self.location.grapheme_index >= self._current_grapheme_count()
        )

    # ------------------------------------------------------------------
    # movement

    def move_text_location(self, direction: Direction) -> None:
        page = saturating_sub(self.size.height, 1)
        if direction is Direction.UP:
            self.move_up(1)
        elif direction is Direction.DOWN:
            self.move_down(1)
        elif direction is Direction.LEFT:
            self.move_left()
        elif direction is Direction.RIGHT:
            self.move_right()
        elif direction is Direction.PAGE_UP:
            self.move_up(page)
        elif direction is Direction.PAGE_DOWN:
            self.move_down(page)
        elif direction is Direction.HOME:
            self.move_to_start_of_line()
        elif direction is Direction.END:
            self.move_to_end_of_line()
        self.scroll_location_into_view()

    def move_up(self, step: int) -> None:
        self.location.line_index = saturating_sub(self.location.line_index, step)
        self._snap_to_valid_grapheme()

    def move_down(self, step: int) -> None:
        self.location.line_index = snap_line_index(
            self.buffer, self.location.line_index + step
        )
        self._snap_to_valid_grapheme()

    def move_right(self) -> None:
        if self.location.grapheme_index < self._current_grapheme_count():
            self.location.grapheme_index += 1
        elif self.location.line_index < self.buffer.height() - 1:
            self.move_to_start_of_line()
            self.move_down(1)

    def move_left(self) -> None:
        if self.location.grapheme_index > 0:
            self.location.grapheme_index -= 1
        elif self.location.line_index > 0:
            self.move_up(1)
            self.move_to_end_of_line()

    def move_to_start_of_line(self) -> None:
        self.location.grapheme_index = 0

    def move_to_end_of_line(self) -> None:
        self.location.grapheme_index = self._current_grapheme_count()

    def _snap_to_valid_grapheme(self) -> None:
        self.location.grapheme_index = snap_grapheme_index(self.buffer, self.location)

    # ------------------------------------------------------------------
    # scrolling

    def scroll_location_into_view(self) -> None:
        position = self.text_location_to_position()
        self._scroll_vertically(position.row)
        self._scroll_horizontally(position.col)

    def _scroll_vertically(self, to: int) -> None:
        row = self._scrolled_origin(self.scroll_offset.row, self.size.height, to)
        if row != self.scroll_offset.row:
            self.scroll_offset = Position(row=row, col=self.scroll_offset.col)
            self.needs_redraw = True

    def _scroll_horizontally(self, to: int) -> None:
        col = self._scrolled_origin(self.scroll_offset.col, self.size.width, to)
        if col != self.scroll_offset.col:
            self.scroll_offset = Position(row=self.scroll_offset.row, col=col)
            self.needs_redraw = True

    @staticmethod
    def _scrolled_origin(origin: int, extent: int, to: int) -> int:
        """Smallest shift of ``origin`` that brings ``to`` into the window."""

        if to < origin:
            return to
        if to >= origin + extent:
            return saturating_sub(to, extent) + 1
        return origin


__all__ = ["TextSource", "View"]
