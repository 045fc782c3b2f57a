"""File storage adapter."""

from .local import InMemoryFileStorage, LocalFileStorage

__all__ = ["LocalFileStorage", "InMemoryFileStorage"]
