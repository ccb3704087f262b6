"""Input/output components for source fragments and rendered files."""

from .storage import FileStore

__all__ = ["FileStore"]
