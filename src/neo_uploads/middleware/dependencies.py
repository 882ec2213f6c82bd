"""FastAPI dependency for handling multipart uploads per route.

Usage:
    @router.post("/upload")
    async def upload_files(result: UploadResult = Depends(upload("uploads"))):
        return result.to_dict()

    @router.post("/avatar")
    async def upload_avatar(
        result: UploadResult = Depends(
            upload("uploads/avatars", {"files": ["avatar"], "exts": ["png", "jpg"], "maxFile": 1})
        )
    ):
        ...
"""

import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, Union

from fastapi import HTTPException, Request

from ..application.services import UploadPipeline
from ..config.settings import UploadSettings
from ..core.entities import UploadResult
from ..core.exceptions import UploadRejectedError, get_http_status_code
from ..core.protocols import MultipartParser
from ..core.value_objects.upload_options import OptionsInput
from .state import UPLOADS_STATE_KEY

logger = logging.getLogger(__name__)


def upload(
    path: str = "uploads",
    options: OptionsInput = None,
    *,
    base_dir: Optional[Union[str, Path]] = None,
    parser: Optional[MultipartParser] = None,
) -> Callable[[Request], Awaitable[UploadResult]]:
    """Create a dependency that accepts the files of a multipart request.

    Options are merged and validated once, here, not per request.

    Args:
        path: Upload directory relative to base_dir, also the URL prefix
        options: UploadOptions or mapping (maxFileSize, randomName, maxFile,
            files, exts)
        base_dir: Root directory, defaults to the current working directory
        parser: Alternative multipart decoder

    Returns:
        Async dependency yielding the UploadResult. Requests that are not
        multipart or carry no files fail with HTTP 422.
    """
    return _dependency_for(UploadPipeline(path, options, base_dir=base_dir, parser=parser))


def upload_from_settings(settings: Optional[UploadSettings] = None) -> Callable[[Request], Awaitable[UploadResult]]:
    """Create an upload dependency configured from UPLOAD_* settings."""
    return _dependency_for(UploadPipeline.from_settings(settings))


def _dependency_for(pipeline: UploadPipeline) -> Callable[[Request], Awaitable[UploadResult]]:
    async def _upload(request: Request) -> UploadResult:
        try:
            result = await pipeline.run(request)
        except UploadRejectedError as exc:
            logger.warning(
                f"Upload rejected: {exc.message}",
                extra={"error_code": exc.error_code, "request_path": request.url.path},
            )
            raise HTTPException(
                status_code=get_http_status_code(exc),
                detail=exc.message,
            ) from exc

        setattr(request.state, UPLOADS_STATE_KEY, result)
        return result

    _upload.pipeline = pipeline
    return _upload
