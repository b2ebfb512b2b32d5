"""Grapheme-aware text buffer and viewport engine for terminal editors."""

__version__ = "0.1.0"

__all__ = [
    "adapters",
    "buffer",
    "config",
    "errors",
    "runtime",
    "view",
]
