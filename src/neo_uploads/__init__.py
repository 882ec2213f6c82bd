"""Neo-Uploads - multipart file upload middleware for NeoMultiTenant services.

Validates the content-type of incoming requests, filters submitted files by
field name, extension and count, enforces a per-file size limit and moves
accepted files into an upload directory under collision-resistant names.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import UploadSettings, get_upload_settings, LoggingConfig, get_logger

from .core.exceptions import (
    NeoUploadsError,
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
    get_http_status_code,
    create_error_response,
)

from .core.entities import (
    UploadedPart,
    AcceptedFile,
    FileError,
    SkippedFile,
    SkipReason,
    UploadResult,
)

from .core.value_objects import (
    UploadOptions,
    DEFAULT_MAX_FILE_SIZE,
    merge_options,
    FileName,
)

from .core.protocols import MultipartParser, FileStore

from .application.filters import (
    filter_by_field_name,
    filter_by_extension,
    filter_by_max_count,
    apply_filters,
)
from .application.validators import validate_content_type
from .application.services import UploadPipeline, UploadProcessor

from .infrastructure import StarletteMultipartParser, LocalFileStore

from .middleware import (
    upload,
    upload_from_settings,
    UploadMiddleware,
    UPLOADS_STATE_KEY,
    get_upload_result,
    require_upload_result,
    register_exception_handlers,
)

__all__ = [
    # Version
    "__version__",

    # Configuration
    "UploadSettings",
    "get_upload_settings",
    "LoggingConfig",
    "get_logger",

    # Exceptions
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
    "get_http_status_code",
    "create_error_response",

    # Entities
    "UploadedPart",
    "AcceptedFile",
    "FileError",
    "SkippedFile",
    "SkipReason",
    "UploadResult",

    # Value Objects
    "UploadOptions",
    "DEFAULT_MAX_FILE_SIZE",
    "merge_options",
    "FileName",

    # Protocols
    "MultipartParser",
    "FileStore",

    # Pipeline
    "filter_by_field_name",
    "filter_by_extension",
    "filter_by_max_count",
    "apply_filters",
    "validate_content_type",
    "UploadPipeline",
    "UploadProcessor",

    # Infrastructure
    "StarletteMultipartParser",
    "LocalFileStore",

    # Middleware
    "upload",
    "upload_from_settings",
    "UploadMiddleware",
    "UPLOADS_STATE_KEY",
    "get_upload_result",
    "require_upload_result",
    "register_exception_handlers",
]
