"""Exceptions surfaced by the editor engine to its host."""

from __future__ import annotations


class TextLoadError(RuntimeError):
    """Raised when the text source cannot provide a document.

    The view that raised it keeps its previous buffer.
    """

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class RenderError(RuntimeError):
    """Raised when the terminal collaborator fails while drawing a row."""

    def __init__(self, message: str, *, row: int | None = None) -> None:
        super().__init__(message)
        self.row = row


__all__ = ["RenderError", "TextLoadError"]
