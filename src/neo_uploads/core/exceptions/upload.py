"""Upload pipeline exceptions.

Request-fatal rejections stop the pipeline before any file is touched,
per-file errors are collected into the result, storage errors abort the
request.
"""

from typing import Any, Dict, Optional

from .base import NeoUploadsError


class UploadConfigurationError(NeoUploadsError):
    """Raised when upload options are invalid."""

    def __init__(self, message: str, option: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        enhanced_details = details or {}
        if option:
            enhanced_details["option"] = option
        super().__init__(message, error_code="INVALID_UPLOAD_OPTIONS", details=enhanced_details)
        self.option = option


# Request-fatal rejections
class UploadRejectedError(NeoUploadsError):
    """Base class for errors that reject the whole request."""
    pass


class InvalidContentTypeError(UploadRejectedError):
    """Raised when the request is not multipart/form-data with a boundary."""

    def __init__(self, content_type: Optional[str] = None):
        super().__init__(
            "Request content-type must be multipart/form-data with a boundary",
            error_code="INVALID_CONTENT_TYPE",
            details={"content_type": content_type},
        )
        self.content_type = content_type


class NoFilesUploadedError(UploadRejectedError):
    """Raised when a well-formed multipart body carries no file parts."""

    def __init__(self):
        super().__init__("No files were uploaded with this request", error_code="NO_FILES_UPLOADED")


class MalformedMultipartError(UploadRejectedError):
    """Raised when the multipart body cannot be decoded."""

    def __init__(self, reason: str):
        super().__init__(
            f"Malformed multipart body: {reason}",
            error_code="MALFORMED_MULTIPART",
            details={"reason": reason},
        )


# Per-file recoverable
class FileRejectedError(NeoUploadsError):
    """Base class for errors that reject a single file and let the rest through."""
    pass


class InvalidFileNameError(FileRejectedError):
    """Raised when a client filename does not name a file.

    Covers empty names and the "." and ".." path components left after
    directory parts are stripped.
    """

    def __init__(self, filename: str):
        super().__init__(
            "Filename is not a valid file name",
            error_code="INVALID_FILE_NAME",
            details={"filename": filename},
        )
        self.filename = filename


class FileTooLargeError(FileRejectedError):
    """Raised when a single file exceeds the configured maximum size.

    The processor turns this into a FileError entry and keeps going with
    the remaining files.
    """

    def __init__(self, filename: str, size: int, max_size: int):
        super().__init__(
            f"File exceeds the maximum size of {max_size} bytes",
            error_code="FILE_TOO_LARGE",
            details={"filename": filename, "size_bytes": size, "max_size_bytes": max_size},
        )
        self.filename = filename
        self.size = size
        self.max_size = max_size


# Storage
class UploadStorageError(NeoUploadsError):
    """Base class for failures placing files into the upload directory."""
    pass


class FileCollisionError(UploadStorageError):
    """Raised when the destination path already exists.

    Stored files are never overwritten.
    """

    def __init__(self, path: str, filename: Optional[str] = None):
        super().__init__(
            f"Destination already exists: {path}",
            error_code="FILE_COLLISION",
            details={"path": path, "filename": filename},
        )
        self.path = path
        self.filename = filename
