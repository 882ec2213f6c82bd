"""Access to the upload result stored on the request state."""

from typing import Optional

from starlette.requests import Request

from ..core.entities import UploadResult

# request.state attribute holding the UploadResult
UPLOADS_STATE_KEY = "uploads"


def get_upload_result(request: Request) -> Optional[UploadResult]:
    """Return the UploadResult of the current request, if uploads ran."""
    return getattr(request.state, UPLOADS_STATE_KEY, None)


def require_upload_result(request: Request) -> UploadResult:
    """Return the UploadResult, failing if the upload middleware did not run."""
    result = get_upload_result(request)
    if result is None:
        raise RuntimeError(
            "No upload result on this request; is UploadMiddleware mounted for this path?"
        )
    return result
