"""Exceptions raised by the upload pipeline."""

from .base import NeoUploadsError, get_http_status_code, create_error_response
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
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "NeoUploadsError",
    "UploadConfigurationError",
    "UploadRejectedError",
    "InvalidContentTypeError",
    "NoFilesUploadedError",
    "MalformedMultipartError",
    "FileRejectedError",
    "InvalidFileNameError",
    "FileTooLargeError",
    "UploadStorageError",
    "FileCollisionError",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
    "create_error_response",
]
