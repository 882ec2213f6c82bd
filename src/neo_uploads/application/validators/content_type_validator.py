"""Content-type validator.

ONLY the request header guard - a request must declare multipart/form-data
with a boundary parameter before its body is read.
"""

from typing import Optional

from python_multipart.multipart import parse_options_header

from ...core.exceptions import InvalidContentTypeError


MULTIPART_FORM_DATA = b"multipart/form-data"


def extract_boundary(content_type: Optional[str]) -> Optional[str]:
    """Return the boundary of a multipart/form-data content-type, or None."""
    if not content_type:
        return None
    media_type, params = parse_options_header(content_type)
    if media_type.strip().lower() != MULTIPART_FORM_DATA:
        return None
    boundary = params.get(b"boundary")
    if not boundary:
        return None
    return boundary.decode("latin-1")


def validate_content_type(content_type: Optional[str]) -> str:
    """Ensure the header describes a multipart form with a boundary.

    Returns:
        The boundary

    Raises:
        InvalidContentTypeError: If the header is missing or not multipart
    """
    boundary = extract_boundary(content_type)
    if not boundary:
        raise InvalidContentTypeError(content_type)
    return boundary
