"""Host integrations: file access and the Textual front-end."""

from .files import FileTextSource

__all__ = ["FileTextSource"]
