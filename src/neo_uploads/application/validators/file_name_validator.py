"""File name validator.

ONLY the client filename check - after directory parts are stripped the
name must still point at a file inside the upload directory.
"""

from ...core.exceptions import InvalidFileNameError
from ...core.value_objects import sanitize_filename

RESERVED_NAMES = frozenset({"", ".", ".."})


def validate_file_name(filename: str) -> str:
    """Return the sanitized filename or raise InvalidFileNameError."""
    name = sanitize_filename(filename)
    if name.strip() in RESERVED_NAMES:
        raise InvalidFileNameError(filename)
    return name
