from __future__ import annotations

import pytest

from termedit.buffer import GraphemeWidth, Line
from termedit.buffer.line import (
    CONTROL_MARKER,
    ELLIPSIS,
    WHITESPACE_MARKER,
    ZERO_WIDTH_MARKER,
)


@pytest.mark.parametrize(
    "text",
    ["", "hello world", "tab\tseparated", "日本語", "naïve café", "e\u0301clair"],
)
def test_plain_text_round_trips(text: str) -> None:
    assert str(Line.from_text(text)) == text


def test_grapheme_count_uses_extended_clusters() -> None:
    assert Line.from_text("abc").grapheme_count() == 3
    assert Line.from_text("e\u0301").grapheme_count() == 1
    assert Line.from_text("🇫🇷🇩🇪").grapheme_count() == 2
    assert Line.from_text("").grapheme_count() == 0


def test_len_counts_graphemes() -> None:
    assert len(Line.from_text("abc")) == 3
    assert len(Line.from_text("e\u0301")) == 1
    assert len(Line.from_text("")) == 0


def test_rendered_width_follows_east_asian_width() -> None:
    fragments = Line.from_text("a日").fragments

    assert fragments[0].rendered_width is GraphemeWidth.HALF
    assert fragments[1].rendered_width is GraphemeWidth.FULL


def test_width_until_maps_graphemes_to_columns() -> None:
    line = Line.from_text("a日b")

    assert line.width_until(0) == 0
    assert line.width_until(1) == 1
    assert line.width_until(2) == 3
    assert line.width_until(3) == 4
    assert line.width_until(10) == 4


def test_width_until_is_non_decreasing() -> None:
    line = Line.from_text("x日\u200bz\x07 ")
    widths = [line.width_until(index) for index in range(line.grapheme_count() + 2)]

    assert widths == sorted(widths)


def test_replacements_for_special_clusters() -> None:
    line = Line.from_text("a\u00a0\x07\u200b b")
    displays = [fragment.replacement for fragment in line.fragments]

    assert displays == [
        None,
        WHITESPACE_MARKER,
        CONTROL_MARKER,
        ZERO_WIDTH_MARKER,
        None,
        None,
    ]
    # Storage keeps the original text.
    assert str(line) == "a\u00a0\x07\u200b b"


@pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_controls(separator: str) -> None:
    fragment = Line.from_text(f"a{separator}b").fragments[1]

    assert fragment.replacement == CONTROL_MARKER


def test_combining_cluster_keeps_its_glyph() -> None:
    (fragment,) = Line.from_text("e\u0301").fragments

    assert fragment.replacement is None
    assert fragment.rendered_width is GraphemeWidth.HALF


def test_visible_graphemes_slice_columns() -> None:
    line = Line.from_text("abcdef")

    assert line.get_visible_graphemes(0, 6) == "abcdef"
    assert line.get_visible_graphemes(2, 4) == "cd"
    assert line.get_visible_graphemes(4, 100) == "ef"
    assert line.get_visible_graphemes(3, 3) == ""
    assert line.get_visible_graphemes(5, 2) == ""


def test_visible_graphemes_mark_cut_wide_glyphs() -> None:
    line = Line.from_text("日本")

    assert line.get_visible_graphemes(0, 4) == "日本"
    assert line.get_visible_graphemes(0, 3) == f"日{ELLIPSIS}"
    assert line.get_visible_graphemes(1, 4) == f"{ELLIPSIS}本"


def test_visible_graphemes_use_replacements() -> None:
    line = Line.from_text("a\x07b")

    assert line.get_visible_graphemes(0, 3) == f"a{CONTROL_MARKER}b"


def test_insert_character_positions() -> None:
    line = Line.from_text("bd")

    line.insert_character("a", 0)
    line.insert_character("c", 2)
    line.insert_character("e", 4)
    line.insert_character("f", 99)

    assert str(line) == "abcdef"


def test_insert_character_resegments_combining_marks() -> None:
    line = Line.from_text("eb")

    line.insert_character("\u0301", 1)

    assert line.grapheme_count() == 2
    assert str(line) == "e\u0301b"


def test_insert_tab_adds_a_grapheme() -> None:
    line = Line.from_text("a")

    line.insert_character("\t", 0)

    assert line.grapheme_count() == 2


def test_delete_removes_one_grapheme() -> None:
    line = Line.from_text("te\u0301st")

    line.delete(1)

    assert str(line) == "tst"


@pytest.mark.parametrize("index", [-1, 4, 14])
def test_delete_out_of_range_is_noop(index: int) -> None:
    line = Line.from_text("test")

    line.delete(index)

    assert str(line) == "test"


@pytest.mark.parametrize("text", ["", "abc", "日本 語", "e\u0301a\u0301"])
def test_split_then_append_restores_text(text: str) -> None:
    for index in range(Line.from_text(text).grapheme_count() + 1):
        line = Line.from_text(text)
        suffix = line.split_at(index)
        assert line.grapheme_count() == index
        line.append(suffix)
        assert str(line) == text


def test_split_beyond_length_returns_empty_line() -> None:
    line = Line.from_text("abc")

    suffix = line.split_at(10)

    assert str(suffix) == ""
    assert str(line) == "abc"


def test_append_merges_text() -> None:
    line = Line.from_text("ab")

    line.append(Line.from_text("cd"))

    assert str(line) == "abcd"
    assert line.grapheme_count() == 4


def test_lines_compare_by_text() -> None:
    assert Line.from_text("abc") == Line.from_text("abc")
    assert Line.from_text("abc") != Line.from_text("abd")
