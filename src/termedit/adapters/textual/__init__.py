"""Textual host for the termedit view."""

from .controller import TextualViewAdapter, ViewHooks, key_to_command

__all__ = ["TextualViewAdapter", "ViewHooks", "key_to_command"]
