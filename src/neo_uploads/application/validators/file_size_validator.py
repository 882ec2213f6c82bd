"""File size validator.

ONLY the per-file size limit. A file of exactly max_file_size bytes passes.
"""

from ...core.exceptions import FileTooLargeError
from ...core.value_objects import UploadOptions


def validate_file_size(filename: str, size: int, options: UploadOptions) -> None:
    """Raise FileTooLargeError if size exceeds the configured limit."""
    if options.size_limited and size > options.max_file_size:
        raise FileTooLargeError(filename, size, options.max_file_size)
