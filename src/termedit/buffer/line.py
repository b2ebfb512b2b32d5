"""Grapheme-cluster model for a single row of text."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import grapheme
from wcwidth import wcswidth

WHITESPACE_MARKER = "␣"
CONTROL_MARKER = "▯"
ZERO_WIDTH_MARKER = "."
ELLIPSIS = "⋯"


class GraphemeWidth(Enum):
    HALF = 1
    FULL = 2

    @property
    def cells(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class TextFragment:
    """One grapheme cluster plus the metadata needed to draw it."""

    grapheme: str
    rendered_width: GraphemeWidth
    replacement: Optional[str] = None

    @property
    def display(self) -> str:
        return self.replacement if self.replacement is not None else self.grapheme


def _cluster_width(cluster: str) -> int:
    width = wcswidth(cluster)
    # wcswidth reports -1 for clusters holding non-printable characters.
    return max(width, 0)


# str.isspace also accepts the information separators, which are controls.
_SEPARATOR_CONTROLS = frozenset("\x1c\x1d\x1e\x1f")


def _is_white_space(ch: str) -> bool:
    return ch.isspace() and ch not in _SEPARATOR_CONTROLS


def _replacement_for(cluster: str, width: int) -> Optional[str]:
    if cluster not in (" ", "\t") and any(_is_white_space(ch) for ch in cluster):
        return WHITESPACE_MARKER
    if cluster != "\t" and any(unicodedata.category(ch) == "Cc" for ch in cluster):
        return CONTROL_MARKER
    if width == 0:
        return ZERO_WIDTH_MARKER
    return None


def fragments_from_text(text: str) -> List[TextFragment]:
    fragments: List[TextFragment] = []
    for cluster in grapheme.graphemes(text):
        width = _cluster_width(cluster)
        fragments.append(
            TextFragment(
                grapheme=cluster,
                rendered_width=GraphemeWidth.FULL if width >= 2 else GraphemeWidth.HALF,
                replacement=_replacement_for(cluster, width),
            )
        )
    return fragments


class Line:
    """A row of text stored as grapheme fragments.

    Edits rebuild the fragment list from the edited text instead of splicing
    it: adding or removing a single character can change where neighbouring
    cluster boundaries fall (combining marks, ZWJ sequences).
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: Optional[Sequence[TextFragment]] = None) -> None:
        self._fragments: List[TextFragment] = list(fragments or ())

    @classmethod
    def from_text(cls, text: str) -> "Line":
        return cls(fragments_from_text(text))

    @property
    def fragments(self) -> tuple[TextFragment, ...]:
        return tuple(self._fragments)

    def grapheme_count(self) -> int:
        return len(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def width_until(self, grapheme_index: int) -> int:
        """Screen column of the grapheme at ``grapheme_index``."""

        end = max(grapheme_index, 0)
        return sum(fragment.rendered_width.cells for fragment in self._fragments[:end])

    def get_visible_graphemes(self, start: int, end: int) -> str:
        """Render the screen columns ``[start, end)`` of this line.

        A fragment that is cut by either edge of the range is drawn as a
        single ellipsis so that wide glyphs never render half-way.
        """

        if start >= end:
            return ""
        parts: List[str] = []
        position = 0
        for fragment in self._fragments:
            if position >= end:
                break
            fragment_end = position + fragment.rendered_width.cells
            if fragment_end > start:
                if fragment_end > end or position < start:
                    parts.append(ELLIPSIS)
                else:
                    parts.append(fragment.display)
            position = fragment_end
        return "".join(parts)

    def insert_character(self, character: str, grapheme_index: int) -> None:
        parts: List[str] = []
        for index, fragment in enumerate(self._fragments):
            if index == grapheme_index:
                parts.append(character)
            parts.append(fragment.grapheme)
        if grapheme_index >= len(self._fragments):
            parts.append(character)
        self._fragments = fragments_from_text("".join(parts))

    def delete(self, grapheme_index: int) -> None:
        if not 0 <= grapheme_index < len(self._fragments):
            return
        remaining = (
            fragment.grapheme
            for index, fragment in enumerate(self._fragments)
            if index != grapheme_index
        )
        self._fragments = fragments_from_text("".join(remaining))

    def split_at(self, grapheme_index: int) -> "Line":
        """Keep the prefix in place and return everything from the index on."""

        if grapheme_index > len(self._fragments):
            return Line()
        index = max(grapheme_index, 0)
        suffix = self._fragments[index:]
        self._fragments = self._fragments[:index]
        return Line(suffix)

    def append(self, other: "Line") -> None:
        self._fragments = fragments_from_text(str(self) + str(other))

    def __str__(self) -> str:
        return "".join(fragment.grapheme for fragment in self._fragments)

    def __repr__(self) -> str:
        return f"Line({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return str(self) == str(other)

    __hash__ = None  # type: ignore[assignment]


__all__ = [
    "CONTROL_MARKER",
    "ELLIPSIS",
    "GraphemeWidth",
    "Line",
    "TextFragment",
    "WHITESPACE_MARKER",
    "ZERO_WIDTH_MARKER",
    "fragments_from_text",
]
