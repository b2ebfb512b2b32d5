"""Ordered collection of lines with location-addressed edits."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, List, Optional

from termedit.runtime import telemetry

from .line import Line
from .state import Location


def split_lines(text: str) -> List[str]:
    """Split decoded text into rows.

    Lines end at ``"\\n"`` with an optional ``"\\r"`` before it; a trailing
    newline does not open an extra row and ``""`` has no rows at all.
    """

    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return [row[:-1] if row.endswith("\r") else row for row in rows]


class Buffer:
    """Lines of the document being edited.

    Locations that fall outside the buffer turn every operation into a
    no-op; nothing here raises for bad coordinates.
    """

    def __init__(self, lines: Optional[Iterable[Line]] = None, *, name: str = "default") -> None:
        self.name = name
        self._lines: List[Line] = list(lines or ())
        self.version = 0

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls((Line.from_text(row) for row in split_lines(text)), name=name)

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(self._lines)

    def height(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def get_line(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def to_text(self) -> str:
        return "\n".join(str(line) for line in self._lines)

    @contextmanager
    def _edit(self, operation: str, at: Location | None = None) -> Iterator[None]:
        metadata = {"buffer": self.name}
        if at is not None:
            metadata["at"] = at.as_tuple()
        with telemetry.span(
            f"buffer::{operation}", component="buffer", metadata=metadata
        ):
            yield
        self.version += 1

    def load(self, text: str) -> None:
        with self._edit("load"):
            self._lines = [Line.from_text(row) for row in split_lines(text)]

    def insert_char(self, character: str, at: Location) -> None:
        if at.line_index > len(self._lines):
            return
        with self._edit("insert_char", at):
            if at.line_index == len(self._lines):
                self._lines.append(Line.from_text(character))
            else:
                self._lines[at.line_index].insert_character(
                    character, at.grapheme_index
                )

    def delete(self, at: Location) -> None:
        line = self.get_line(at.line_index)
        if line is None:
            return
        count = line.grapheme_count()
        if at.grapheme_index >= count and at.line_index + 1 < len(self._lines):
            with self._edit("merge_lines", at):
                following = self._lines.pop(at.line_index + 1)
                line.append(following)
        elif 0 <= at.grapheme_index < count:
            with self._edit("delete", at):
                line.delete(at.grapheme_index)

    def insert_line(self, at: Location) -> None:
        if at.line_index == len(self._lines):
            with self._edit("insert_line", at):
                self._lines.append(Line())
            return
        line = self.get_line(at.line_index)
        if line is None:
            return
        with self._edit("insert_line", at):
            self._lines.insert(at.line_index + 1, line.split_at(at.grapheme_index))


__all__ = ["Buffer", "split_lines"]
