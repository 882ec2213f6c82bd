"""Upload value objects."""

from .upload_options import UploadOptions, DEFAULT_MAX_FILE_SIZE, merge_options
from .file_name import FileName, sanitize_filename, extension_of

__all__ = [
    "UploadOptions",
    "DEFAULT_MAX_FILE_SIZE",
    "merge_options",
    "FileName",
    "sanitize_filename",
    "extension_of",
]
