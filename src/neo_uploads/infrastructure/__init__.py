"""Infrastructure adapters: multipart parsing and local storage."""

from .parsers import StarletteMultipartParser
from .storage import LocalFileStore

__all__ = ["StarletteMultipartParser", "LocalFileStore"]
