"""HTTP status code mapping for neo-uploads exceptions."""

from typing import Dict, Type

from .base import NeoUploadsError
from .upload import (
    UploadConfigurationError,
    UploadRejectedError,
    InvalidContentTypeError,
    NoFilesUploadedError,
    MalformedMultipartError,
    FileRejectedError,
    InvalidFileNameError,
    FileTooLargeError,
    UploadStorageError,
    FileCollisionError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 409 Conflict
    FileCollisionError: 409,

    # 413 Payload Too Large
    FileTooLargeError: 413,

    # 422 Unprocessable Entity
    FileRejectedError: 422,
    InvalidFileNameError: 422,
    UploadRejectedError: 422,
    InvalidContentTypeError: 422,
    NoFilesUploadedError: 422,
    MalformedMultipartError: 422,

    # 500 Internal Server Error
    UploadConfigurationError: 500,
    UploadStorageError: 500,

    # Default for NeoUploadsError
    NeoUploadsError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the status code, walking the MRO for unmapped subclasses."""
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
        if exception_type is Exception:
            break
    return 500
