from __future__ import annotations

from pathlib import Path

import pytest

from termedit.adapters import FileTextSource
from termedit.errors import TextLoadError
from termedit.view import Size, View


def test_reads_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("héllo\n世界\n", encoding="utf-8")

    assert FileTextSource().read_text(str(path)) == "héllo\n世界\n"


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        FileTextSource().read_text(str(tmp_path / "nope.txt"))


def test_view_loads_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("one\ntwo\nthree\n", encoding="utf-8")
    view = View(size=Size(20, 5), text_source=FileTextSource())

    view.load(str(path))

    assert view.buffer.height() == 3
    assert view.buffer.to_text() == "one\ntwo\nthree"


def test_view_reports_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\x00bad")
    view = View(size=Size(20, 5), text_source=FileTextSource())
    view.load_text("previous")

    with pytest.raises(TextLoadError) as excinfo:
        view.load(str(path))

    assert excinfo.value.path == str(path)
    assert view.buffer.to_text() == "previous"
