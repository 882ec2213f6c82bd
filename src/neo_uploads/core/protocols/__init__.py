"""Upload protocols."""

from .multipart_parser import MultipartParser
from .file_store import FileStore

__all__ = ["MultipartParser", "FileStore"]
