"""Exception handlers translating neo-uploads errors into HTTP responses."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    NeoUploadsError,
    UploadRejectedError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)


async def upload_error_handler(request: Request, exc: NeoUploadsError) -> JSONResponse:
    """Render a NeoUploadsError as the structured error body."""
    status_code = get_http_status_code(exc)

    error_response = create_error_response(exc)
    error_response["error"]["timestamp"] = datetime.now(timezone.utc).isoformat()
    error_response["error"]["path"] = request.url.path

    if isinstance(exc, UploadRejectedError):
        log_level = logging.WARNING
    else:
        log_level = logging.ERROR

    logger.log(
        log_level,
        f"{exc.__class__.__name__}: {exc.message}",
        extra={"error_code": exc.error_code, "request_path": request.url.path},
    )

    return JSONResponse(status_code=status_code, content=error_response)


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Install the neo-uploads exception handler on an application."""
    app.add_exception_handler(NeoUploadsError, upload_error_handler)
    return app
