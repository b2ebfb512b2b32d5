"""File-system backed text source for the view."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class FileTextSource:
    """Reads UTF-8 documents; errors propagate to ``View.load``."""

    encoding: str = "utf-8"

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding=self.encoding)


__all__ = ["FileTextSource"]
