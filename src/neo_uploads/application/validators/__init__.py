"""Request and file validators."""

from .content_type_validator import validate_content_type, extract_boundary, MULTIPART_FORM_DATA
from .file_name_validator import validate_file_name
from .file_size_validator import validate_file_size

__all__ = [
    "validate_content_type",
    "extract_boundary",
    "MULTIPART_FORM_DATA",
    "validate_file_name",
    "validate_file_size",
]
