"""Upload entities."""

from .uploaded_part import UploadedPart
from .accepted_file import AcceptedFile, BYTES_PER_MEGABYTE
from .file_error import FileError, SkippedFile, SkipReason
from .upload_result import UploadResult

__all__ = [
    "UploadedPart",
    "AcceptedFile",
    "BYTES_PER_MEGABYTE",
    "FileError",
    "SkippedFile",
    "SkipReason",
    "UploadResult",
]
