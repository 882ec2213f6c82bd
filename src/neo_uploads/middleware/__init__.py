"""FastAPI and Starlette integration for the upload pipeline.

Two ways to mount it:
- per route, as a dependency: Depends(upload("uploads", options))
- app wide, as UploadMiddleware with include_paths
"""

from .dependencies import upload, upload_from_settings
from .upload_middleware import UploadMiddleware
from .state import UPLOADS_STATE_KEY, get_upload_result, require_upload_result
from .error_handlers import upload_error_handler, register_exception_handlers

__all__ = [
    "upload",
    "upload_from_settings",
    "UploadMiddleware",
    "UPLOADS_STATE_KEY",
    "get_upload_result",
    "require_upload_result",
    "upload_error_handler",
    "register_exception_handlers",
]
