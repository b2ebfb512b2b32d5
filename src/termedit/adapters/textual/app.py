"""Executable Textual app that hosts the termedit view."""

from __future__ import annotations

import argparse
import dataclasses
import os
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
    from wcwidth import wcwidth
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use termedit.adapters.textual.app"
    ) from exc

from termedit.adapters.files import FileTextSource
from termedit.config import EditorConfig
from termedit.errors import TextLoadError
from termedit.runtime import telemetry
from termedit.view import Position, StyledRow, View

from .controller import TextualViewAdapter, ViewHooks


def _char_index_for_cell(text: str, cell: int) -> int:
    """Index of the character drawn at screen column ``cell``."""

    column = 0
    for index, char in enumerate(text):
        if column >= cell:
            return index
        column += max(wcwidth(char), 0)
    return len(text)


class TermeditApp(App[None]):
    """Single-pane editor: buffer view plus a one-line status bar."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    def __init__(
        self, *, path: Optional[str] = None, config: Optional[EditorConfig] = None
    ) -> None:
        super().__init__()
        self.path = path
        self.config = config or EditorConfig.from_env()
        self.view: View | None = None
        self.adapter: TextualViewAdapter | None = None
        self._rows: List[StyledRow] = []
        self._cursor = Position()
        self._status = ""
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    async def on_mount(self) -> None:
        self.view = View(config=self.config, text_source=FileTextSource())
        status = self.path or "[no name]"
        if self.path:
            try:
                self.view.load(self.path)
            except TextLoadError as exc:
                status = str(exc)
        hooks = ViewHooks(
            update_rows=self._update_rows,
            update_cursor=self._update_cursor,
            update_status=self._update_status,
            request_quit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualViewAdapter(self.view, hooks)
        self._update_status(status)
        self.call_after_refresh(self._sync_size)

    def on_resize(self, event: events.Resize) -> None:
        del event
        self.call_after_refresh(self._sync_size)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result is not None:
            event.stop()

    def _sync_size(self) -> None:
        if not self.adapter or not self._buffer_widget:
            return
        size = self._buffer_widget.content_size
        self.adapter.handle_resize(size.width, size.height)

    def _update_rows(self, rows: List[StyledRow]) -> None:
        self._rows = rows
        self._repaint()

    def _update_cursor(self, position: Position) -> None:
        self._cursor = position
        self._repaint()
        self._update_status(self._status)

    def _update_status(self, status: str) -> None:
        self._status = status
        if self._status_widget and self.view:
            location = self.view.location
            self._status_widget.update(
                f"{status}  Ln {location.line_index + 1}, Col {location.grapheme_index + 1}"
            )

    def _repaint(self) -> None:
        if not self._buffer_widget:
            return
        body = Text()
        for index, row in enumerate(self._rows):
            line = Text(row.text, style=row.color or "")
            if index == self._cursor.row:
                at = _char_index_for_cell(row.text, self._cursor.col)
                if at >= len(row.text):
                    line.append(" ")
                line.stylize("reverse", at, at + 1)
            if index:
                body.append("\n")
            body.append_text(line)
        self._buffer_widget.update(body)

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "host.log", level="debug", data={"line": line}, logger_name="termedit.host"
        )


def _parse_args(
    argv: Optional[Sequence[str]] = None, *, defaults: Optional[EditorConfig] = None
) -> argparse.Namespace:
    defaults = defaults or EditorConfig.from_env()
    parser = argparse.ArgumentParser(description="Edit a text file in the terminal.")
    parser.add_argument("path", nargs="?", help="File to open")
    parser.add_argument(
        "--tab-width",
        type=int,
        default=defaults.tab_width,
        help="Spaces inserted for a tab (0 inserts a literal tab, default: %(default)s)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=os.environ.get("TERMEDIT_LOG_PRESET"),
        help="telelog preset to use instead of the TERMEDIT_* defaults",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    defaults = EditorConfig.from_env()
    args = _parse_args(argv, defaults=defaults)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    config = dataclasses.replace(defaults, tab_width=max(args.tab_width, 0))
    TermeditApp(path=args.path, config=config).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
