from __future__ import annotations

import pytest

from termedit.buffer import Buffer, Location, snap_location, split_lines


def texts(buffer: Buffer) -> list[str]:
    return [str(line) for line in buffer.lines]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("\n", [""]),
        ("abc", ["abc"]),
        ("abc\n", ["abc"]),
        ("a\n\nb", ["a", "", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


def test_empty_buffer_differs_from_single_empty_line() -> None:
    empty = Buffer.from_text("")
    blank = Buffer.from_text("\n")

    assert empty.is_empty() and empty.height() == 0
    assert not blank.is_empty() and blank.height() == 1


def test_load_replaces_lines() -> None:
    buffer = Buffer.from_text("old")

    buffer.load("new\nlines")

    assert texts(buffer) == ["new", "lines"]
    assert buffer.to_text() == "new\nlines"


def test_insert_char_appends_line_at_height() -> None:
    buffer = Buffer()

    buffer.insert_char("x", Location(0, 0))

    assert texts(buffer) == ["x"]


def test_insert_char_delegates_to_line() -> None:
    buffer = Buffer.from_text("ac")

    buffer.insert_char("b", Location(0, 1))

    assert texts(buffer) == ["abc"]


def test_insert_char_beyond_height_is_noop() -> None:
    buffer = Buffer.from_text("a")
    version = buffer.version

    buffer.insert_char("b", Location(5, 0))

    assert texts(buffer) == ["a"]
    assert buffer.version == version


def test_delete_inside_line() -> None:
    buffer = Buffer.from_text("abc")

    buffer.delete(Location(0, 1))

    assert texts(buffer) == ["ac"]


def test_delete_at_line_end_merges_following_line() -> None:
    buffer = Buffer.from_text("ab\ncd\nef")

    buffer.delete(Location(0, 2))

    assert texts(buffer) == ["abcd", "ef"]
    assert buffer.height() == 2


@pytest.mark.parametrize("at", [Location(0, 2), Location(3, 0), Location(0, 9)])
def test_delete_past_end_of_buffer_is_noop(at: Location) -> None:
    buffer = Buffer.from_text("de")
    version = buffer.version

    buffer.delete(at)

    assert texts(buffer) == ["de"]
    assert buffer.version == version


def test_insert_line_splits_at_location() -> None:
    buffer = Buffer.from_text("abcd\nz")

    buffer.insert_line(Location(0, 2))

    assert texts(buffer) == ["ab", "cd", "z"]


def test_insert_line_at_end_of_line_opens_empty_line() -> None:
    buffer = Buffer.from_text("ab")

    buffer.insert_line(Location(0, 2))

    assert texts(buffer) == ["ab", ""]


def test_insert_line_at_height_appends_empty_line() -> None:
    buffer = Buffer()

    buffer.insert_line(Location(0, 0))

    assert texts(buffer) == [""]


def test_insert_line_beyond_height_is_noop() -> None:
    buffer = Buffer.from_text("ab")

    buffer.insert_line(Location(4, 0))

    assert texts(buffer) == ["ab"]


def test_version_counts_mutations() -> None:
    buffer = Buffer.from_text("ab")

    buffer.insert_char("c", Location(0, 2))
    buffer.delete(Location(0, 0))
    buffer.insert_line(Location(0, 1))

    assert buffer.version == 3


def test_get_line_out_of_range() -> None:
    buffer = Buffer.from_text("a")

    assert buffer.get_line(0) is not None
    assert buffer.get_line(1) is None
    assert buffer.get_line(-1) is None


def test_snap_location_clamps_into_buffer() -> None:
    buffer = Buffer.from_text("abc\nd")

    assert snap_location(buffer, Location(7, 7)).as_tuple() == (1, 1)
    assert snap_location(buffer, Location(0, 2)).as_tuple() == (0, 2)
    assert snap_location(Buffer(), Location(3, 3)).as_tuple() == (0, 0)
